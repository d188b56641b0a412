""" The :class:`Envelope` is the unit exchanged with the host runtime: a
    string *tag* identifying the kind of message, and an opaque *data*
    payload whose shape only the registered decoder for that tag knows about.
    This module converts envelopes to and from their raw representations; it
    does not look inside the payload.
"""

from collections.abc import Mapping

from . import fields
from . import json
from .errors import MalformedEnvelope


class Envelope:
    """ A single tagged message. Instances are treated as immutable once
        created; the payload is never inspected or copied.

        :ivar tag: String discriminator for the message kind.
        :ivar data: Arbitrary JSON-compatible payload, possibly None.
    """

    __slots__ = ('tag', 'data')

    def __init__(self, tag, data=None):
        self.tag = tag
        self.data = data


    def __eq__(self, other):
        if isinstance(other, Envelope):
            return self.tag == other.tag and self.data == other.data
        return NotImplemented


    def __repr__(self):
        return 'Envelope(%r, %r)' % (self.tag, self.data)


    def to_dict(self):
        return {fields.TAG: self.tag, fields.DATA: self.data}


# end of class Envelope



def encode(tag, data=None):
    """ Wrap *data* in an :class:`Envelope` tagged with *tag*. The payload
        is passed through untouched; only the tag is checked.
    """

    if isinstance(tag, str):
        pass
    else:
        raise TypeError('envelope tag must be a string, not ' + type(tag).__name__)

    return Envelope(tag, data)



def decode(raw):
    """ Interpret *raw* as an :class:`Envelope`. The *raw* value may be an
        existing :class:`Envelope`, a mapping, or JSON text as bytes or str.
        :class:`ports.errors.MalformedEnvelope` is raised if the value lacks a
        string ``tag`` or has no ``data`` key at all; a ``data`` value of
        None (JSON null) is a legitimate payload. Any other keys are ignored.
    """

    if isinstance(raw, Envelope):
        raw = raw.to_dict()
    elif isinstance(raw, (bytes, bytearray, memoryview, str)):
        try:
            raw = json.loads(raw)
        except json.Error as e:
            raise MalformedEnvelope('envelope is not valid JSON: ' + str(e))

    if isinstance(raw, Mapping):
        pass
    else:
        raise MalformedEnvelope('envelope must be an object, not ' + type(raw).__name__)

    try:
        tag = raw[fields.TAG]
    except KeyError:
        raise MalformedEnvelope("envelope has no '%s' field" % (fields.TAG))

    if isinstance(tag, str):
        pass
    else:
        raise MalformedEnvelope("envelope '%s' must be a string, not %s" % (fields.TAG, type(tag).__name__))

    try:
        data = raw[fields.DATA]
    except KeyError:
        raise MalformedEnvelope("envelope '%s' has no '%s' field" % (tag, fields.DATA))

    return Envelope(tag, data)



def pack(envelope):
    """ Return the compact JSON frame, as bytes, for the supplied
        :class:`Envelope`. This is what goes on the wire to the host.
    """

    return json.dumps(envelope.to_dict())



def unpack(frame):
    """ Inverse of :func:`pack`; equivalent to :func:`decode` for a frame
        received from the host.
    """

    return decode(frame)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
