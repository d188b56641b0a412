"""In-process transport.

Stands in for the host runtime when there is no real one: tests, demos, and
applications embedding both sides in the same process.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from ..envelope import Envelope
from .base import Transport, TransportClosed

logger = logging.getLogger(__name__)


class LoopbackTransport(Transport):
    """Record outbound envelopes and inject inbound messages directly.

    If a *host* callable is given it is invoked with every outbound
    envelope; a non-None return value is injected back as an inbound raw
    message, which is enough to model a host that answers requests.
    """

    def __init__(self, host: Optional[Callable[[Envelope], Any]] = None):
        self.host = host
        self.sent: List[Envelope] = []
        self._receive: Optional[Callable[[Any], None]] = None

    @property
    def is_open(self) -> bool:
        return self._receive is not None

    def open(self, receive: Callable[[Any], None]) -> None:
        self._receive = receive
        logger.debug("loopback transport open")

    def close(self) -> None:
        self._receive = None
        logger.debug("loopback transport closed")

    def send(self, envelope: Envelope) -> None:
        if self._receive is None:
            raise TransportClosed("loopback transport is not open")

        self.sent.append(envelope)

        if self.host is None:
            return

        reply = self.host(envelope)
        if reply is not None:
            self.inject(reply)

    def inject(self, raw: Any) -> None:
        """Deliver *raw* as if it had arrived from the host."""

        if self._receive is None:
            raise TransportClosed("loopback transport is not open")

        self._receive(raw)
