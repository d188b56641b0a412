"""Transport interface.

This is the (small) contract a host boundary implementation follows. The
channel owns the transport: it opens it with its own inbound entry point,
hands it envelopes to send, and closes it at teardown.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..envelope import Envelope
from ..errors import PortsError


class TransportError(PortsError):
    """Base class for all transport-layer errors."""


class TransportClosed(TransportError):
    """An operation needed an open transport."""


class Transport(ABC):
    """Minimal contract for a host boundary transport."""

    @abstractmethod
    def open(self, receive: Callable[[Any], None]) -> None:
        """Establish the connection; call *receive* with each raw inbound message."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the connection."""

    @abstractmethod
    def send(self, envelope: Envelope) -> None:
        """Forward one envelope to the host."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
