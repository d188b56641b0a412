""" Composable payload decoders. A decoder is any callable that accepts the
    opaque ``data`` from an envelope and either returns a domain value or
    raises an exception; :class:`ports.errors.DecodeError` is the exception
    these helpers raise. Simple decoders are plain functions, for example
    :func:`string`; the remaining functions build a new decoder out of one or
    more existing decoders.
"""

from .errors import DecodeError


def _describe(value):
    if value is None:
        return 'null'
    return type(value).__name__


def anything(data):
    return data


def string(data):
    if isinstance(data, str):
        return data
    raise DecodeError('expected a string, got ' + _describe(data))


def integer(data):

    # bool is a subclass of int; a JSON true is not an integer.

    if isinstance(data, int) and not isinstance(data, bool):
        return data
    raise DecodeError('expected an integer, got ' + _describe(data))


def number(data):
    if isinstance(data, (int, float)) and not isinstance(data, bool):
        return data
    raise DecodeError('expected a number, got ' + _describe(data))


def boolean(data):
    if isinstance(data, bool):
        return data
    raise DecodeError('expected a boolean, got ' + _describe(data))


def null(data):
    if data is None:
        return None
    raise DecodeError('expected null, got ' + _describe(data))



def optional(decoder):
    """ Accept None as-is, otherwise defer to *decoder*.
    """

    def decode_optional(data):
        if data is None:
            return None
        return decoder(data)

    return decode_optional



def list_of(decoder):
    """ Decode a JSON array, applying *decoder* to every element. The first
        failing element aborts the whole decode.
    """

    def decode_list(data):
        if isinstance(data, list):
            pass
        else:
            raise DecodeError('expected a list, got ' + _describe(data))

        decoded = list()
        for index, element in enumerate(data):
            try:
                decoded.append(decoder(element))
            except DecodeError as e:
                raise DecodeError('element %d: %s' % (index, e))

        return decoded

    return decode_list



def field(name, decoder):
    """ Decode the field *name* of a JSON object with *decoder*.
    """

    def decode_field(data):
        if isinstance(data, dict):
            pass
        else:
            raise DecodeError("expected an object with field '%s', got %s" % (name, _describe(data)))

        try:
            value = data[name]
        except KeyError:
            raise DecodeError("missing field '%s'" % (name))

        try:
            return decoder(value)
        except DecodeError as e:
            raise DecodeError("field '%s': %s" % (name, e))

    return decode_field



def record(**decoders):
    """ Decode a JSON object into a dictionary, one decoder per named field.
        Fields not named here are ignored.
    """

    field_decoders = dict()
    for name, decoder in decoders.items():
        field_decoders[name] = field(name, decoder)

    def decode_record(data):
        decoded = dict()
        for name, decoder in field_decoders.items():
            decoded[name] = decoder(data)
        return decoded

    return decode_record



def one_of(*decoders):
    """ Try each decoder in turn, returning the first successful result.
    """

    if len(decoders) == 0:
        raise ValueError('one_of() requires at least one decoder')

    def decode_one_of(data):
        failures = list()
        for decoder in decoders:
            try:
                return decoder(data)
            except DecodeError as e:
                failures.append(str(e))

        raise DecodeError('no alternative matched: ' + '; '.join(failures))

    return decode_one_of



def apply(function, decoder):
    """ Decode with *decoder*, then pass the result through *function*;
        this is how a decoded payload becomes a domain object.
    """

    def decode_apply(data):
        return function(decoder(data))

    return decode_apply


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
