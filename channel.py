class Channel(object):
    """
    A channel passes data from one sender to a number of receivers. Senders are handed out by `connect`; a sender never
    sends to its own receiver. Those who only observe (e.g. the listeners for updates of a scroll position) connect and
    simply ignore the returned sender; those who only speak use `broadcast`.

    >>> from channel import Channel
    >>> c = Channel()
    >>> def r0(data):
    ...     print("R0 RECEIVED", data)
    ...
    >>> def r1(data):
    ...     print("R1 RECEIVED", data)
    ...
    >>> s0 = c.connect(r0)
    >>> s1 = c.connect(r1)
    >>> s0((3, 0.5))
    R1 RECEIVED (3, 0.5)
    >>> c.broadcast((4, 0.0))
    R0 RECEIVED (4, 0.0)
    R1 RECEIVED (4, 0.0)
    >>> c.disconnect(r0)
    >>> c.broadcast((5, 0.25))
    R1 RECEIVED (5, 0.25)
    """

    def __init__(self):
        self.receivers = []

    def connect(self, receiver):
        # receiver :: function that takes data
        self.receivers.append(receiver)

        def send(data):
            for r in self.receivers:
                if r is not receiver:
                    r(data)

        return send

    def disconnect(self, receiver):
        self.receivers = [r for r in self.receivers if r is not receiver]

    def broadcast(self, data):
        for r in self.receivers:
            r(data)
