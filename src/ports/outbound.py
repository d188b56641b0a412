""" Outbound half of the bridge. Sending is fire-and-forget: the caller gets
    control back as soon as the envelope is queued or handed to the
    transport, there is no acknowledgement from the host, and a transport
    failure is logged rather than raised.
"""

import collections
import logging
import threading

from . import envelope

logger = logging.getLogger(__name__)


class Sender:
    """ Queue outbound envelopes and forward them to the *transport* in the
        order they were issued. Anything sent before the transport is open
        stays queued until :func:`flush` is called with the transport open.

        :ivar sent: Number of envelopes handed to the transport.
        :ivar dropped: Number of envelopes discarded: refused by the transport,
                       sent while closed, or still queued at :func:`close`.
        :ivar closed: True between :func:`close` and the next :func:`open`.
    """

    def __init__(self, transport=None):

        self.transport = transport
        self.sent = 0
        self.dropped = 0
        self.closed = False

        self.pending = collections.deque()
        self._lock = threading.Lock()
        self._owner = None


    def send(self, tag, data=None):
        """ Send *data* to the host tagged as *tag*. A non-string *tag* is
            a programming error and raises TypeError immediately; nothing
            else about the send is reported back to the caller.
        """

        outgoing = envelope.encode(tag, data)
        self._queue(outgoing)


    def send_message(self, message):
        """ Send a :class:`ports.message.Outbound` instance.
        """

        self._queue(message.envelope())


    def _queue(self, outgoing):

        if self.closed:
            self.dropped += 1
            logger.debug("channel closed, dropping outbound '%s'", outgoing.tag)
            return

        self.pending.append(outgoing)
        self.flush()


    def open(self):
        """ Accept sends again after a :func:`close`.
        """

        self.closed = False


    def close(self):
        """ Refuse further sends, and discard anything still queued so it
            cannot go out if the channel is started again.
        """

        self.closed = True
        self.dropped += len(self.pending)
        self.pending.clear()


    def flush(self):
        """ Forward every queued envelope, oldest first. Does nothing if the
            transport is absent or not yet open.
        """

        transport = self.transport

        if transport is None or not transport.is_open:
            return

        # Sends issued from inside transport.send() (a host that answers
        # synchronously, for example) are picked up by the loop already
        # running in this thread.

        if self._owner == threading.get_ident():
            return

        with self._lock:
            self._owner = threading.get_ident()
            try:
                while self.pending:
                    outgoing = self.pending.popleft()
                    try:
                        transport.send(outgoing)
                    except Exception:
                        self.dropped += 1
                        logger.exception("dropped outbound '%s'", outgoing.tag)
                        continue
                    self.sent += 1
            finally:
                self._owner = None


# end of class Sender


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
