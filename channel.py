class Channel(object):
    """
    Broadcasts data to all connected receivers. Connecting returns a disposer; calling it disconnects again.

    >>> from channel import Channel
    >>> c = Channel()
    >>> def r0(data):
    ...     print("R0 RECEIVED", data)
    ...
    >>> def r1(data):
    ...     print("R1 RECEIVED", data)
    ...
    >>> dispose0 = c.connect(r0)
    >>> dispose1 = c.connect(r1)
    >>> c.broadcast("hallo")
    R0 RECEIVED hallo
    R1 RECEIVED hallo
    >>> dispose0()
    >>> c.broadcast("hallo")
    R1 RECEIVED hallo

    Disconnecting is idempotent; and receivers may also be disconnected by passing them explicitly:
    >>> dispose0()
    >>> c.disconnect(r1)
    >>> c.broadcast("hallo")
    >>> len(c)
    0
    """

    def __init__(self):
        self.receivers = []

    def connect(self, receiver):
        # receiver :: function that takes data
        self.receivers.append(receiver)

        def dispose():
            self.disconnect(receiver)

        return dispose

    def disconnect(self, receiver):
        if receiver in self.receivers:
            self.receivers.remove(receiver)

    def broadcast(self, data):
        # iterate over a copy: receivers may disconnect (themselves or others) while handling the data
        for r in list(self.receivers):
            r(data)

    def __len__(self):
        return len(self.receivers)
