""" Message types on either side of the dispatch boundary: :class:`Message`
    is what a module receives after its decoder accepts an inbound payload,
    and :class:`Outbound` is the base class for the tagged values a module
    sends to the host.
"""

from . import envelope


class Message:
    """ A decoded inbound message, as delivered to a single module. If the
        same envelope fans out to several modules each of them receives its
        own :class:`Message`, carrying whatever its own decoder returned.

        :ivar module: Name of the module the message is addressed to.
        :ivar tag: Tag of the originating envelope.
        :ivar value: The result of the module's decoder.
    """

    __slots__ = ('module', 'tag', 'value')

    def __init__(self, module, tag, value):
        self.module = module
        self.tag = tag
        self.value = value


    def __eq__(self, other):
        if isinstance(other, Message):
            return (self.module, self.tag, self.value) == (other.module, other.tag, other.value)
        return NotImplemented


    def __repr__(self):
        return 'Message(%r, %r, %r)' % (self.module, self.tag, self.value)


# end of class Message



class Outbound:
    """ Base class for the outbound messages a module knows how to send.
        Each module is expected to declare one subclass per message kind,
        setting the class attribute *tag* and implementing :func:`encode`
        to return the JSON-compatible payload::

            class SaveDocument(ports.Outbound):
                tag = 'saveDocument'

                def __init__(self, name, text):
                    self.name = name
                    self.text = text

                def encode(self):
                    return {'name': self.name, 'text': self.text}

        The instance only lives as long as the send call that consumes it.
    """

    tag = None

    def encode(self):
        raise NotImplementedError('Outbound subclasses must implement encode()')


    def envelope(self):
        """ Return the :class:`ports.envelope.Envelope` for this message.
        """

        if self.tag is None:
            raise TypeError(type(self).__name__ + ' does not declare a tag')

        return envelope.encode(self.tag, self.encode())


# end of class Outbound


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
