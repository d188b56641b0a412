""" A small Ports application: one module counts round trips through the
    host, another just watches. Run echo_host.py first.
"""

import logging
import sys
import threading

import ports


class Ping(ports.Outbound):
    tag = 'Ping'

    def __init__(self, count):
        self.count = count

    def encode(self):
        return {'count': self.count}



class Counter:
    """ Sends a Ping, and another every time the host answers, until
        *limit* round trips have completed.
    """

    def __init__(self, port, limit):

        self.port = port
        self.limit = limit
        self.done = threading.Event()

        port.subscribe('Pong', ports.decode.field('count', ports.decode.integer))
        port.on_message(self.update)


    def begin(self):
        self.port.send(Ping(0))


    def update(self, message):

        count = message.value + 1
        print('round trip %d' % (count))

        if count < self.limit:
            self.port.send(Ping(count))
        else:
            self.port.send('Done', count)
            self.done.set()


# end of class Counter



def main():

    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) > 1:
        ports.config.address(sys.argv[1])

    channel = ports.Channel()
    channel.on_error(lambda report: print('error: ' + str(report)))

    counter = Counter(channel.port('Counter'), limit=5)

    watcher = channel.port('Watcher')
    watcher.subscribe('Pong', ports.decode.anything)
    watcher.on_message(lambda message: print('watcher saw ' + repr(message.value)))

    with channel:
        counter.begin()
        counter.done.wait(10)


if __name__ == '__main__':
    main()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
