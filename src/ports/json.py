''' Thin wrapper around :mod:`orjson` so that every component encodes and
    decodes the wire format the same way. Like :func:`orjson.dumps`, the
    :func:`dumps` function here always returns bytes.

    Integers are limited to 64 bits. :func:`loads` hands back a float for a
    wider integer literal, silently losing precision; decoders that need
    exact large numbers should have the host send them as strings.
    :func:`dumps` refuses such integers outright.
'''

import orjson


Error = orjson.JSONDecodeError


def dumps(value):
    return orjson.dumps(value)


def loads(value):
    return orjson.loads(value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
