"""ZeroMQ host transport.

One PAIR socket carries the whole conversation with the host; every frame is
a single JSON envelope, ``{"tag": ..., "data": ...}``. A background thread
polls for inbound frames and hands them, still raw, to the channel, which
decides whether they are well-formed.
"""

from __future__ import annotations

import atexit
import logging
import threading
from typing import Any, Callable, Optional

import zmq

from .. import config
from ..envelope import Envelope, pack
from .base import Transport, TransportClosed, TransportError

logger = logging.getLogger(__name__)

zmq_context = zmq.Context()


class ZmqTransport(Transport):
    """Exchange envelopes with the host over a ZeroMQ PAIR socket.

    The *address* is a ZeroMQ endpoint; by default the socket connects to
    it, with *bind* set it listens there instead. Unspecified arguments come
    from :mod:`ports.config`.
    """

    poll_timeout = 1000   # milliseconds

    def __init__(self, address: Optional[str] = None, bind: Optional[bool] = None):
        if address is None:
            address = config.address()
        if bind is None:
            bind = config.bind()

        self.address = address
        self.bind = bind

        self.socket = None
        self.socket_lock = threading.Lock()
        self.thread: Optional[threading.Thread] = None
        self.shutdown = False
        self._receive: Optional[Callable[[Any], None]] = None

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self, receive: Callable[[Any], None]) -> None:
        if self.socket is not None:
            return

        socket = zmq_context.socket(zmq.PAIR)
        socket.setsockopt(zmq.LINGER, 0)

        try:
            if self.bind:
                socket.bind(self.address)
            else:
                socket.connect(self.address)
        except zmq.ZMQError as e:
            socket.close()
            raise TransportError(f"cannot reach host at {self.address}: {e}") from e

        self._receive = receive
        self.shutdown = False
        self.socket = socket

        self.thread = threading.Thread(target=self.run, name="ports-zmq")
        self.thread.daemon = True
        self.thread.start()

        _open_transports.add(self)
        logger.info("%s host transport at %s", "bound" if self.bind else "connected", self.address)

    def close(self) -> None:
        if self.socket is None:
            return

        self.shutdown = True
        if self.thread is not None and self.thread is not threading.current_thread():
            self.thread.join()
        self.thread = None

        with self.socket_lock:
            self.socket.close()
            self.socket = None

        _open_transports.discard(self)
        logger.debug("host transport at %s closed", self.address)

    def send(self, envelope: Envelope) -> None:
        frame = pack(envelope)

        with self.socket_lock:
            if self.socket is None:
                raise TransportClosed(f"transport to {self.address} is closed")

            # Never wait on the host: with no peer connected (or a full
            # queue) the frame is refused rather than held.

            try:
                self.socket.send(frame, zmq.NOBLOCK)
            except zmq.Again as e:
                raise TransportError(f"host at {self.address} is not accepting messages") from e

    def run(self) -> None:
        poller = zmq.Poller()
        poller.register(self.socket, zmq.POLLIN)

        while self.shutdown == False:
            sockets = dict(poller.poll(self.poll_timeout))
            if self.socket not in sockets:
                continue

            with self.socket_lock:
                if self.shutdown:
                    break
                frame = self.socket.recv()

            self._incoming(frame)

    def _incoming(self, frame: bytes) -> None:
        receive = self._receive
        if receive is None:
            return

        # The channel reports bad frames itself; anything raised here is a
        # bug, and must not kill the receiving thread.

        try:
            receive(frame)
        except Exception:
            logger.exception("error handling inbound frame from %s", self.address)


_open_transports = set()


def shutdown():
    for transport in tuple(_open_transports):
        transport.close()


atexit.register(shutdown)
