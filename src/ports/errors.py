"""Exceptions raised by the Ports machinery.

Only setup-time mistakes surface to the caller as exceptions; problems with
inbound traffic are caught at the dispatch boundary and turned into reports.
"""


class PortsError(Exception):
    """Base class for all Ports errors."""


class RegistrationError(PortsError):
    """A subscription or callback could not be registered."""


class DuplicateSubscription(RegistrationError):
    """The same (module, tag) pair was registered twice."""


class MalformedEnvelope(PortsError):
    """Raw inbound data does not have the {tag, data} envelope shape."""


class DecodeError(PortsError):
    """A decoder rejected the payload it was given."""
