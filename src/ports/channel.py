""" The :class:`Channel` ties the bridge together: one registry, one
    dispatcher, one reporter, and one outbound sender sharing a single host
    transport. A channel is an ordinary object, created by the application
    and handed to each module at construction; there is no module-level
    instance, and several channels can coexist in one process.

    Modules usually work through a :class:`Port`, which is a view of the
    channel bound to the module's name::

        channel = ports.Channel()
        port = channel.port('Editor')
        port.subscribe('documentLoaded', ports.decode.string)
        port.on_message(editor.update)
        channel.start()
"""

import logging

from . import transport as transports
from .dispatch import Dispatcher
from .message import Outbound
from .outbound import Sender
from .registry import Registry
from .report import Reporter

logger = logging.getLogger(__name__)


class Channel:
    """ Context object for one host boundary. If no *transport* is given,
        one is created according to :mod:`ports.config`.
    """

    def __init__(self, transport=None):

        if transport is None:
            transport = transports.create()

        self.transport = transport
        self.registry = Registry()
        self.reporter = Reporter()
        self.dispatcher = Dispatcher(self.registry, self.reporter)
        self.sender = Sender(transport)


    def __enter__(self):
        self.start()
        return self


    def __exit__(self, *exc_info):
        self.close()


    def register_subscription(self, module, tag, decode):
        """ Subscribe *module* to inbound *tag* messages, decoded by *decode*.
            Raises :class:`ports.errors.DuplicateSubscription` if the pair is
            already registered.
        """

        return self.registry.register(module, tag, decode)


    def on_inbound_message(self, module, callback):
        """ Install the callback receiving decoded messages for *module*.
        """

        self.dispatcher.on_message(module, callback)


    def on_error(self, callback):
        """ Install a sink receiving every :class:`ports.report.ErrorReport`.
        """

        self.reporter.on_error(callback)


    def send(self, tag, data=None):
        self.sender.send(tag, data)


    def send_message(self, message):
        self.sender.send_message(message)


    def receive(self, raw):
        """ Entry point for raw messages arriving from the host. Transports
            call this; tests and embedding applications may too.
        """

        self.dispatcher.receive(raw)


    def port(self, module):
        return Port(self, module)


    def start(self):
        """ End the initialization phase: freeze the registry, open the
            transport, and forward anything sent before now.
        """

        self.registry.freeze()
        self.sender.open()

        if self.transport.is_open:
            pass
        else:
            self.transport.open(self.receive)

        self.sender.flush()
        logger.debug('channel started with %d subscriptions', len(self.registry))


    def close(self):
        """ Close the transport and discard every subscription, inbound
            callback, and unsent outbound envelope.
        """

        self.sender.close()

        if self.transport.is_open:
            self.transport.close()

        self.registry.clear()
        self.dispatcher.handlers.clear()


# end of class Channel



class Port:
    """ A module's view of a :class:`Channel`: the same operations, with the
        module name filled in.
    """

    def __init__(self, channel, module):

        if isinstance(module, str):
            pass
        else:
            raise TypeError('module name must be a string')

        self.channel = channel
        self.module = module


    def __repr__(self):
        return 'Port(%r)' % (self.module)


    def subscribe(self, tag, decode):
        return self.channel.register_subscription(self.module, tag, decode)


    def on_message(self, callback):
        self.channel.on_inbound_message(self.module, callback)


    def send(self, message, data=None):
        """ Send either an :class:`ports.message.Outbound` instance, or a
            plain *tag* string with its *data*.
        """

        if isinstance(message, Outbound):
            self.channel.send_message(message)
        else:
            self.channel.send(message, data)


# end of class Port


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
