from cardtable_engine.utils.timers import TimerQueue


def test_fires_in_due_order():
    timers = TimerQueue()
    fired = []
    timers.schedule(300, lambda: fired.append("b"), now=0)
    timers.schedule(100, lambda: fired.append("a"), now=0)
    timers.schedule(500, lambda: fired.append("c"), now=0)

    assert timers.advance(300) == 2
    assert fired == ["a", "b"]
    assert len(timers) == 1

    timers.advance(1000)
    assert fired == ["a", "b", "c"]


def test_same_due_is_fifo():
    timers = TimerQueue()
    fired = []
    for name in "xyz":
        timers.schedule(10, lambda n=name: fired.append(n), now=0)
    timers.advance(10)
    assert fired == ["x", "y", "z"]


def test_cancel():
    timers = TimerQueue()
    fired = []
    handle = timers.schedule(100, lambda: fired.append(1), now=0)

    assert timers.is_pending(handle)
    assert timers.cancel(handle)
    assert not timers.is_pending(handle)
    assert not timers.cancel(handle)
    assert len(timers) == 0

    assert timers.advance(1000) == 0
    assert fired == []


def test_cancel_after_fire_returns_false():
    timers = TimerQueue()
    handle = timers.schedule(5, lambda: None, now=0)
    timers.advance(5)
    assert not timers.cancel(handle)
    assert not timers.cancel(None)


def test_clock_never_goes_backwards():
    timers = TimerQueue()
    timers.advance(500)
    timers.advance(100)
    assert timers.now == 500

    # Sans 'now' explicite, le délai part de l'horloge courante
    fired = []
    timers.schedule(50, lambda: fired.append(1))
    timers.advance(549)
    assert fired == []
    timers.advance(550)
    assert fired == [1]


def test_callback_can_schedule_another():
    timers = TimerQueue()
    fired = []

    def first():
        fired.append("first")
        timers.schedule(0, lambda: fired.append("second"))

    timers.schedule(10, first, now=0)
    timers.advance(10)
    assert fired == ["first", "second"]
