"""Wire and report vocabulary.

Keep these in one place to avoid stringly-typed message handling.
"""

# Envelope keys on the wire.

TAG = "tag"
DATA = "data"

# Error report kinds.

MALFORMED_ENVELOPE = "MalformedEnvelope"
UNHANDLED_TAG = "UnhandledTag"
DECODE_FAILURE = "DecodeFailure"
HANDLER_FAILURE = "HandlerFailure"

REPORT_KINDS = frozenset((
    MALFORMED_ENVELOPE,
    UNHANDLED_TAG,
    DECODE_FAILURE,
    HANDLER_FAILURE,
))
