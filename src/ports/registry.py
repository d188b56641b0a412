""" The subscription registry maps inbound tags to the decoders interested in
    them. Tags are namespaced per module: a module may register a given tag
    only once, but any number of modules may register the same tag, and an
    inbound envelope with that tag fans out to all of them.

    The registry is populated during initialization and frozen before the
    first dispatch; after that point it is read-only, which is why lookups
    need no locking.
"""

import threading

from .errors import DuplicateSubscription, RegistrationError


class Subscription:
    """ One (*module*, *tag*, *decode*) entry in a :class:`Registry`.
    """

    __slots__ = ('module', 'tag', 'decode')

    def __init__(self, module, tag, decode):
        self.module = module
        self.tag = tag
        self.decode = decode


    def __repr__(self):
        return 'Subscription(%r, %r)' % (self.module, self.tag)


# end of class Subscription



class Registry:
    """ Ordered (*tag* -> list of :class:`Subscription`) table. The lists
        are kept in registration order, which is the order subscribers are
        invoked during dispatch.

        :ivar frozen: True once :func:`freeze` has been called.
    """

    def __init__(self):

        self.frozen = False

        self._by_tag = dict()
        self._ordered = list()
        self._pairs = set()
        self._lock = threading.Lock()


    def __contains__(self, pair):
        return pair in self._pairs


    def __iter__(self):
        return iter(tuple(self._ordered))


    def __len__(self):
        return len(self._ordered)


    def __repr__(self):
        return 'registry.Registry: ' + repr(self._ordered)


    def register(self, module, tag, decode):
        """ Add a subscription for *module* to inbound envelopes tagged with
            *tag*; *decode* will be applied to the envelope payload. A
            :class:`ports.errors.DuplicateSubscription` exception is raised if
            this *module* already registered this *tag*, and a
            :class:`ports.errors.RegistrationError` if the registry is frozen.
        """

        if isinstance(module, str) and isinstance(tag, str):
            pass
        else:
            raise TypeError('module name and tag must both be strings')

        if callable(decode):
            pass
        else:
            raise TypeError('decoder must be callable')

        pair = (module, tag)
        subscription = Subscription(module, tag, decode)

        with self._lock:
            if self.frozen:
                raise RegistrationError("cannot register '%s' for module '%s': dispatch has already begun" % (tag, module))

            if pair in self._pairs:
                raise DuplicateSubscription("module '%s' already subscribed to '%s'" % (module, tag))

            try:
                subscriptions = self._by_tag[tag]
            except KeyError:
                subscriptions = list()
                self._by_tag[tag] = subscriptions

            subscriptions.append(subscription)
            self._ordered.append(subscription)
            self._pairs.add(pair)

        return subscription


    def lookup(self, tag):
        """ Return a tuple of every :class:`Subscription` for *tag*, across
            all modules, in registration order. The tuple is empty if nobody
            subscribed to *tag*.
        """

        try:
            subscriptions = self._by_tag[tag]
        except KeyError:
            return ()

        return tuple(subscriptions)


    def modules(self):
        """ Return the module names with at least one subscription, in the
            order they first registered.
        """

        found = dict()
        for subscription in self._ordered:
            found[subscription.module] = True

        return tuple(found)


    def tags(self, module=None):
        """ Return the subscribed tags, optionally restricted to one *module*.
        """

        found = dict()
        for subscription in self._ordered:
            if module is None or subscription.module == module:
                found[subscription.tag] = True

        return tuple(found)


    def freeze(self):
        """ Reject any further calls to :func:`register`. This is invoked
            when dispatch begins; calling it more than once is harmless.
        """

        with self._lock:
            self.frozen = True


    def clear(self):
        """ Drop every subscription and accept registrations again. This is
            only appropriate when tearing down the owning channel.
        """

        with self._lock:
            self._by_tag.clear()
            self._ordered.clear()
            self._pairs.clear()
            self.frozen = False


# end of class Registry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
