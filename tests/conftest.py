import ports
import pytest


@pytest.fixture
def loopback():
    return ports.transport.LoopbackTransport()


@pytest.fixture
def channel(loopback):

    channel = ports.Channel(loopback)

    yield channel

    channel.close()


@pytest.fixture
def reports(channel):
    """ Every ErrorReport generated by the channel fixture, in order.
    """

    collected = list()
    channel.on_error(collected.append)
    return collected


@pytest.fixture
def config_environment(monkeypatch):
    """ Clear any Ports settings from the environment and the config cache,
        both before and after the test.
    """

    for variable in ('PORTS_TRANSPORT', 'PORTS_ADDRESS', 'PORTS_BIND'):
        monkeypatch.setenv(variable, '')
        monkeypatch.delenv(variable)

    ports.config.reset()
    yield monkeypatch
    ports.config.reset()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
