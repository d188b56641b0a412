"""Host boundary transports."""

from __future__ import annotations

from typing import Optional

from .. import config
from .base import (
    Transport,
    TransportError,
    TransportClosed,
)
from .loopback import LoopbackTransport


def create(kind: Optional[str] = None, address: Optional[str] = None, bind: Optional[bool] = None) -> Transport:
    """Build a transport of the given *kind*, defaulting to ``PORTS_TRANSPORT``."""

    if kind is None:
        kind = config.transport()

    if kind == "loopback":
        return LoopbackTransport()

    if kind == "zmq":
        from .zmq import ZmqTransport
        return ZmqTransport(address, bind)

    raise ValueError(f"unknown transport: {kind!r}")
