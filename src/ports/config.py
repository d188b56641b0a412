""" Runtime configuration for the host boundary. Settings come from the
    environment; each one is read on first use and remembered afterwards, so
    changes to the environment after that point are ignored unless a new
    value is set through the corresponding function here.

    ``PORTS_TRANSPORT``
        Which transport to build when none is given: ``zmq`` or ``loopback``.

    ``PORTS_ADDRESS``
        ZeroMQ endpoint used to reach the host.

    ``PORTS_BIND``
        If true, bind the endpoint instead of connecting to it.
"""

import os


default_transport = 'zmq'
default_address = 'tcp://127.0.0.1:10139'

transports = set(('loopback', 'zmq'))
true_values = set(('1', 'true', 'yes', 'on'))

_found = dict()


def _setting(variable, default, override=None):
    """ Helper for the public functions below: return the cached value for
        the environment *variable*, looking it up if necessary. An *override*
        replaces both the cached and the environment value.
    """

    if override is not None:
        override = str(override)
        os.environ[variable] = override
        _found[variable] = override
        return override

    try:
        return _found[variable]
    except KeyError:
        pass

    try:
        found = os.environ[variable]
    except KeyError:
        found = default

    _found[variable] = found
    return found



def transport(default=None):
    """ Return the name of the transport to use when a
        :class:`ports.Channel` is created without one.
    """

    found = _setting('PORTS_TRANSPORT', default_transport, default)
    found = found.strip().lower()

    if found in transports:
        return found

    raise ValueError('unknown PORTS_TRANSPORT: ' + repr(found))



def address(default=None):
    """ Return the ZeroMQ endpoint for the host, for example
        ``tcp://127.0.0.1:10139`` or ``ipc:///tmp/host.sock``.
    """

    found = _setting('PORTS_ADDRESS', default_address, default)
    found = found.strip()

    if found == '':
        raise ValueError('PORTS_ADDRESS is empty')

    return found



def bind(default=None):
    """ Return True if the local side should bind the endpoint rather
        than connect to it. Usually the host owns the endpoint.
    """

    if default is not None:
        default = '1' if default else '0'

    found = _setting('PORTS_BIND', '0', default)
    return found.strip().lower() in true_values



def reset():
    """ Forget every cached setting; the environment is consulted again on
        the next lookup.
    """

    _found.clear()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
