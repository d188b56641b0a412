""" Python implementation of Ports, a bridge for exchanging tagged messages
    with a host runtime on the other side of a process or language boundary.
    Application modules register decoders for the tags they care about, send
    tagged messages to the host, and receive decoded messages back; anything
    malformed or unexpected is reported rather than raised.
"""

# Utility components.

from . import json
from . import fields
from . import errors

# Submodules used by multiple other components.

from . import envelope
from . import decode
from . import message
from . import config

# Primary public-facing interfaces.

from . import registry
from . import report
from . import dispatch
from . import outbound
from . import transport

from .channel import Channel, Port
from .message import Message, Outbound

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
