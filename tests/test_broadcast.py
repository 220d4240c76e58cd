import asyncio

from webwater.server import Broadcaster


class _FakeWebSocket:
    def __init__(self):
        self.sent = []
        self.closed = False

    async def send_json(self, payload):
        self.sent.append(payload)

    async def close(self):
        self.closed = True


class _BrokenWebSocket(_FakeWebSocket):
    async def send_json(self, payload):
        raise ConnectionResetError("peer went away")


class _SlowWebSocket(_FakeWebSocket):
    async def send_json(self, payload):
        await asyncio.sleep(5.0)
        self.sent.append(payload)


def test_broadcast_reaches_every_subscriber():
    hub = Broadcaster()
    a, b = _FakeWebSocket(), _FakeWebSocket()
    hub.subscribe(a)
    hub.subscribe(b)

    delivered = asyncio.run(hub.broadcast({"type": "state_update", "clock": 1.0}))

    assert delivered == 2
    assert a.sent == [{"type": "state_update", "clock": 1.0}]
    assert b.sent == a.sent

def test_subscribe_is_idempotent():
    hub = Broadcaster()
    ws = _FakeWebSocket()
    hub.subscribe(ws)
    hub.subscribe(ws)
    assert len(hub) == 1

    hub.unsubscribe(ws)
    hub.unsubscribe(ws)
    assert len(hub) == 0

def test_failing_subscriber_is_dropped():
    hub = Broadcaster()
    good, bad = _FakeWebSocket(), _BrokenWebSocket()
    hub.subscribe(good)
    hub.subscribe(bad)

    delivered = asyncio.run(hub.broadcast({"n": 1}))

    assert delivered == 1
    assert len(hub) == 1
    assert bad.closed
    assert good.sent == [{"n": 1}]

    # not retried on the next round
    assert asyncio.run(hub.broadcast({"n": 2})) == 1
    assert good.sent == [{"n": 1}, {"n": 2}]

def test_slow_subscriber_times_out():
    hub = Broadcaster(send_timeout=0.05)
    fast, slow = _FakeWebSocket(), _SlowWebSocket()
    hub.subscribe(fast)
    hub.subscribe(slow)

    delivered = asyncio.run(hub.broadcast({"n": 1}))

    assert delivered == 1
    assert len(hub) == 1
    assert slow.sent == []
    assert fast.sent == [{"n": 1}]

def test_broadcast_with_no_subscribers():
    assert asyncio.run(Broadcaster().broadcast({})) == 0

class _StalledWebSocket(_FakeWebSocket):
    async def send_json(self, payload):
        await asyncio.sleep(3600.0)

    async def close(self):
        await asyncio.sleep(3600.0)


def test_stalled_close_does_not_block_broadcast():
    hub = Broadcaster(send_timeout=0.05)
    fast, stalled = _FakeWebSocket(), _StalledWebSocket()
    hub.subscribe(fast)
    hub.subscribe(stalled)

    delivered = asyncio.run(asyncio.wait_for(hub.broadcast({"n": 1}), timeout=1.0))

    assert delivered == 1
    assert len(hub) == 1
    assert fast.sent == [{"n": 1}]
