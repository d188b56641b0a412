""" Exercise the ZeroMQ transport against a host stand-in: a plain PAIR
    socket driven from the test itself.
"""

import threading
import time

import ports
import pytest
import zmq

from ports.transport.zmq import ZmqTransport, zmq_context


def wait_for(condition, timeout=5):
    expiration = time.time() + timeout
    while time.time() < expiration:
        if condition():
            return True
        time.sleep(0.01)
    return False


class Host:
    """ The far side of the boundary: a bound PAIR socket on a random port.
    """

    def __init__(self):
        self.socket = zmq_context.socket(zmq.PAIR)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.setsockopt(zmq.RCVTIMEO, 5000)
        self.socket.setsockopt(zmq.SNDTIMEO, 5000)
        port = self.socket.bind_to_random_port('tcp://127.0.0.1')
        self.address = 'tcp://127.0.0.1:%d' % (port)

    def send(self, frame):
        self.socket.send(frame)

    def recv(self):
        return self.socket.recv()

    def close(self):
        self.socket.close()


@pytest.fixture
def host():

    host = Host()
    yield host
    host.close()


def test_round_trip(host):

    transport = ZmqTransport(host.address, bind=False)
    transport.poll_timeout = 50
    channel = ports.Channel(transport)

    received = list()
    reports = list()
    channel.register_subscription('Foo', 'Ping', ports.decode.string)
    channel.on_inbound_message('Foo', received.append)
    channel.on_error(reports.append)

    channel.send('Hello', {'version': 1})

    with channel:
        assert transport.is_open

        frame = host.recv()
        assert ports.json.loads(frame) == {'tag': 'Hello', 'data': {'version': 1}}

        host.send(b'{"tag": "Ping", "data": "hello"}')
        host.send(b'not even json')
        host.send(b'{"tag": "Ping", "data": 42}')

        assert wait_for(lambda: len(received) + len(reports) == 3)

    assert transport.is_open == False

    assert received == [ports.Message('Foo', 'Ping', 'hello')]
    assert [report.kind for report in reports] == [
        ports.fields.MALFORMED_ENVELOPE,
        ports.fields.DECODE_FAILURE,
    ]


def test_send_after_close(host):

    transport = ZmqTransport(host.address, bind=False)
    transport.poll_timeout = 50
    transport.open(lambda raw: None)
    transport.close()

    with pytest.raises(ports.transport.TransportClosed):
        transport.send(ports.envelope.encode('Ping'))

    # Closing twice is harmless.

    transport.close()


def test_inbound_thread_survives(host):

    transport = ZmqTransport(host.address, bind=False)
    transport.poll_timeout = 50

    calls = list()

    def receive(raw):
        calls.append(raw)
        if len(calls) == 1:
            raise RuntimeError('bug in the receiving side')

    transport.open(receive)

    try:
        host.send(b'first')
        host.send(b'second')
        assert wait_for(lambda: len(calls) == 2)
        assert calls == [b'first', b'second']
        assert transport.thread.is_alive()
    finally:
        transport.close()



def test_send_without_host():
    """ A bound transport with nobody connected refuses frames instead of
        waiting for a peer; the channel drops them and can still be closed.
    """

    transport = ZmqTransport('tcp://127.0.0.1:*', bind=True)
    transport.poll_timeout = 50
    channel = ports.Channel(transport)
    channel.start()

    finished = threading.Event()

    def send():
        channel.send('Ping', 'hello')
        finished.set()

    sender = threading.Thread(target=send)
    sender.daemon = True
    sender.start()

    try:
        assert finished.wait(5)
        assert channel.sender.dropped == 1
        assert channel.sender.sent == 0

        with pytest.raises(ports.transport.TransportError):
            transport.send(ports.envelope.encode('Ping'))
    finally:
        closer = threading.Thread(target=channel.close)
        closer.daemon = True
        closer.start()
        closer.join(5)

    assert closer.is_alive() == False
    assert transport.is_open == False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
