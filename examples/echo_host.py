""" A minimal host runtime for trying out a Ports application without the
    real host: it binds a ZeroMQ PAIR socket, answers every ``Ping`` with a
    ``Pong`` carrying the same payload, and prints everything else it is
    sent. Start this first, then run counter.py against the same address.
"""

import argparse
import zmq

import ports


def main():

    parser = argparse.ArgumentParser(description='Echo host for Ports applications')
    parser.add_argument('address', nargs='?', default=ports.config.default_address,
        help='ZeroMQ endpoint to bind (default: %(default)s)')
    args = parser.parse_args()

    socket = zmq.Context.instance().socket(zmq.PAIR)
    socket.bind(args.address)
    print('host listening on ' + args.address)

    while True:
        frame = socket.recv()

        try:
            envelope = ports.envelope.unpack(frame)
        except ports.errors.MalformedEnvelope as e:
            print('ignoring malformed frame: ' + str(e))
            continue

        print('received ' + repr(envelope))

        if envelope.tag == 'Ping':
            reply = ports.envelope.encode('Pong', envelope.data)
            socket.send(ports.envelope.pack(reply))


if __name__ == '__main__':
    main()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
