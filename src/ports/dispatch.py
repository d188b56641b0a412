""" The inbound dispatcher turns raw messages from the host into decoded
    :class:`ports.message.Message` instances for the subscribing modules.

    Dispatch is strictly sequential. A raw message is fully processed,
    including every fan-out callback, before the next one is looked at; a
    message arriving in the meantime, whether from a transport thread or
    re-entrantly from inside a callback, waits in the pending queue. Every
    failure along the way is handed to the :class:`ports.report.Reporter`
    and never propagates out of :func:`Dispatcher.receive`.
"""

import collections
import logging
import threading

from . import envelope
from . import fields
from .errors import MalformedEnvelope, RegistrationError
from .message import Message

logger = logging.getLogger(__name__)

IDLE = 'idle'
DISPATCHING = 'dispatching'


class Dispatcher:
    """ Resolve inbound envelopes against a :class:`ports.registry.Registry`
        and deliver the results. Failures go to the *reporter*.

        :ivar state: :data:`IDLE` or :data:`DISPATCHING`.
        :ivar received: Number of raw messages processed.
        :ivar delivered: Number of messages handed to module callbacks.
    """

    def __init__(self, registry, reporter):

        self.registry = registry
        self.reporter = reporter
        self.handlers = dict()

        self.state = IDLE
        self.received = 0
        self.delivered = 0

        self.pending = collections.deque()
        self._lock = threading.Lock()
        self._owner = None


    def on_message(self, module, callback):
        """ Install the *callback* that receives every decoded
            :class:`ports.message.Message` for *module*. Only one callback
            may be installed per module.
        """

        if callable(callback):
            pass
        else:
            raise TypeError('callback must be callable')

        if module in self.handlers:
            raise RegistrationError("module '%s' already has an inbound callback" % (module))

        self.handlers[module] = callback


    def receive(self, raw):
        """ Accept one raw message from the host boundary. The message is
            queued behind anything already pending; if no dispatch is in
            progress the queue is drained before this call returns.
        """

        self.pending.append(raw)

        # A callback sending another message our way from inside the
        # dispatch loop: the loop already running will get to it.

        if self._owner == threading.get_ident():
            return

        with self._lock:
            self._owner = threading.get_ident()
            try:
                self.registry.freeze()
                while self.pending:
                    raw = self.pending.popleft()
                    try:
                        self._dispatch(raw)
                    except Exception:
                        logger.exception('unexpected error dispatching %r', raw)
            finally:
                self._owner = None


    def _dispatch(self, raw):

        self.state = DISPATCHING
        self.received += 1

        try:
            try:
                inbound = envelope.decode(raw)
            except MalformedEnvelope as e:
                self.reporter.report(fields.MALFORMED_ENVELOPE, raw=raw, error=e)
                return

            subscriptions = self.registry.lookup(inbound.tag)

            if len(subscriptions) == 0:
                self.reporter.report(fields.UNHANDLED_TAG, tag=inbound.tag, raw=inbound.data)
                return

            failures = 0

            for subscription in subscriptions:
                try:
                    value = subscription.decode(inbound.data)
                except Exception as e:
                    failures += 1
                    self.reporter.report(fields.DECODE_FAILURE, inbound.tag, subscription.module, inbound.data, e)
                    continue

                message = Message(subscription.module, inbound.tag, value)
                self._deliver(message, inbound.data)

            if failures == len(subscriptions):
                logger.debug("all %d subscribers rejected '%s'", failures, inbound.tag)

        finally:
            self.state = IDLE


    def _deliver(self, message, raw):

        try:
            callback = self.handlers[message.module]
        except KeyError:
            logger.debug('no inbound callback for %r, dropping %r', message.module, message)
            return

        try:
            callback(message)
        except Exception as e:
            self.reporter.report(fields.HANDLER_FAILURE, message.tag, message.module, raw, e)
            return

        self.delivered += 1


# end of class Dispatcher


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
