""" Error reporting for the dispatch path. Nothing that goes wrong with an
    inbound message is allowed to escape as an exception; instead it becomes
    an :class:`ErrorReport`, which is logged and handed to any sinks the
    application installed (a monitoring service, a test, a status display).
"""

import logging
import time
import traceback

from . import fields

logger = logging.getLogger(__name__)


class ErrorReport:
    """ Description of one failure to turn an inbound envelope into a
        delivered message.

        :ivar kind: One of the kinds in :data:`ports.fields.REPORT_KINDS`.
        :ivar tag: The envelope tag, if the envelope got that far.
        :ivar module: The subscribing module, for per-module failures.
        :ivar raw: The offending raw message or payload.
        :ivar error: A dictionary with the exception ``type``, ``text``, and
                     ``debug`` traceback, or None.
        :ivar time: UNIX epoch timestamp for when the report was generated.
    """

    valid_kinds = fields.REPORT_KINDS

    def __init__(self, kind, tag=None, module=None, raw=None, error=None):

        if kind in self.valid_kinds:
            pass
        else:
            raise ValueError('invalid report kind: ' + repr(kind))

        if isinstance(error, BaseException):
            error = describe(error)

        self.kind = kind
        self.tag = tag
        self.module = module
        self.raw = raw
        self.error = error
        self.time = time.time()


    def __repr__(self):
        return 'ErrorReport(%s, tag=%r, module=%r)' % (self.kind, self.tag, self.module)


    def __str__(self):

        if self.kind == fields.MALFORMED_ENVELOPE:
            text = 'malformed envelope'
        elif self.kind == fields.UNHANDLED_TAG:
            text = "no subscribers for '%s'" % (self.tag)
        elif self.kind == fields.DECODE_FAILURE:
            text = "module '%s' could not decode '%s'" % (self.module, self.tag)
        else:
            text = "module '%s' failed handling '%s'" % (self.module, self.tag)

        if self.error is not None:
            text = text + ': ' + str(self.error['text'])

        return text


    def to_dict(self):
        report = dict()
        report['kind'] = self.kind
        report['tag'] = self.tag
        report['module'] = self.module
        report['raw'] = self.raw
        report['error'] = self.error
        report['time'] = self.time
        return report


# end of class ErrorReport



def describe(exception):
    """ Summarize an exception as a dictionary, in the same shape used for
        the ``error`` field of an :class:`ErrorReport`.
    """

    error = dict()
    error['type'] = type(exception).__name__
    error['text'] = str(exception)
    error['debug'] = ''.join(traceback.format_exception(type(exception), exception, exception.__traceback__))
    return error



class Reporter:
    """ Terminal sink for :class:`ErrorReport` instances. Every report is
        logged, then passed to each callback registered via :func:`on_error`,
        in registration order. A failing callback is logged and skipped; the
        :func:`report` method itself never raises.

        :ivar counts: Number of reports generated, by kind.
    """

    def __init__(self):
        self.sinks = list()
        self.counts = dict.fromkeys(fields.REPORT_KINDS, 0)


    def on_error(self, callback):
        """ Register a *callback* that receives every :class:`ErrorReport`.
            Callbacks should be lightweight; they are invoked synchronously
            from the dispatch loop.
        """

        if callable(callback):
            pass
        else:
            raise TypeError('callback must be callable')

        self.sinks.append(callback)


    def report(self, kind, tag=None, module=None, raw=None, error=None):
        """ Generate and distribute an :class:`ErrorReport`. The report is
            returned, or None if it could not be generated at all.
        """

        try:
            report = ErrorReport(kind, tag, module, raw, error)
        except Exception:
            logger.exception('unable to generate %s report', kind)
            return None

        self.counts[kind] += 1

        logger.warning('%s: %s', report.kind, report)

        for sink in tuple(self.sinks):
            try:
                sink(report)
            except Exception:
                logger.exception('error sink %r failed on %r', sink, report)
                continue

        return report


# end of class Reporter


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
