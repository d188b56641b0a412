import ports
import pytest

from ports.envelope import Envelope
from ports.outbound import Sender


class Save(ports.Outbound):
    tag = 'save'

    def __init__(self, name):
        self.name = name

    def encode(self):
        return {'name': self.name}


class Untagged(ports.Outbound):

    def encode(self):
        return None


def test_send_in_order(loopback):

    loopback.open(lambda raw: None)
    sender = Sender(loopback)

    sender.send('first', 1)
    sender.send('second')
    sender.send_message(Save('notes.txt'))

    assert loopback.sent == [
        Envelope('first', 1),
        Envelope('second', None),
        Envelope('save', {'name': 'notes.txt'}),
    ]
    assert sender.sent == 3


def test_buffered_until_open(loopback):

    sender = Sender(loopback)
    sender.send('early', 1)
    sender.send('earlier', 2)

    assert loopback.sent == []
    assert len(sender.pending) == 2

    loopback.open(lambda raw: None)
    sender.flush()

    assert [envelope.tag for envelope in loopback.sent] == ['early', 'earlier']
    assert len(sender.pending) == 0


def test_bad_tag(loopback):

    sender = Sender(loopback)

    with pytest.raises(TypeError):
        sender.send(42, 'data')

    with pytest.raises(TypeError):
        sender.send_message(Untagged())

    assert len(sender.pending) == 0


def test_transport_failure_is_not_raised():

    class Broken(ports.transport.LoopbackTransport):
        def send(self, envelope):
            if envelope.tag == 'bad':
                raise ConnectionError('host went away')
            ports.transport.LoopbackTransport.send(self, envelope)

    transport = Broken()
    transport.open(lambda raw: None)
    sender = Sender(transport)

    sender.send('good', 1)
    sender.send('bad', 2)
    sender.send('good', 3)

    assert [envelope.data for envelope in transport.sent] == [1, 3]
    assert sender.sent == 2
    assert sender.dropped == 1


def test_reentrant_send():
    """ A host answering synchronously cannot cut in line ahead of sends
        that were already queued.
    """

    def host(envelope):
        if envelope.tag == 'first':
            sender.send('reply', None)

    transport = ports.transport.LoopbackTransport(host)
    transport.open(lambda raw: None)
    sender = Sender(transport)

    sender.pending.append(ports.envelope.encode('first'))
    sender.pending.append(ports.envelope.encode('second'))
    sender.flush()

    assert [envelope.tag for envelope in transport.sent] == ['first', 'second', 'reply']


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
