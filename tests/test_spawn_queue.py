def fill(context, make_delegate):
    return [context.spawn(make_delegate()) for _ in range(context.max_dialogs)]


def test_queued_delegate_keeps_first_payload(context, make_delegate):
    dialogs = fill(context, make_delegate)
    waiting = make_delegate()

    assert context.spawn(waiting, "first") is None
    assert context.spawn(waiting, "second") is None

    assert context.queue.pending() == [(waiting, "first")]

    dialogs[0].hide()

    assert context.active_dialogs[-1].delegate is waiting
    assert context.active_dialogs[-1].data == "first"


def test_queued_spawns_replay_in_request_order(context, make_delegate):
    dialogs = fill(context, make_delegate)
    first, second = make_delegate(), make_delegate()
    context.spawn(first)
    context.spawn(second)

    dialogs[0].hide()
    assert context.active_dialogs[-1].delegate is first
    assert second in context.queue

    dialogs[1].hide()
    assert context.active_dialogs[-1].delegate is second
    assert len(context.queue) == 0


def test_empty_string_payload_is_queued_as_none(context, make_delegate):
    fill(context, make_delegate)
    waiting = make_delegate()

    context.spawn(waiting, "")

    assert context.queue.pending() == [(waiting, None)]


def test_enqueue_reports_duplicates(context, make_delegate):
    delegate = make_delegate()

    assert context.queue.enqueue(delegate, 1)
    assert not context.queue.enqueue(delegate, 2)
    assert context.queue.pop() == (delegate, 1)
    assert len(context.queue) == 0


def test_drain_stops_when_slots_run_out(context, make_delegate):
    fill(context, make_delegate)
    context.active_dialogs[0].hide()
    waiting = [make_delegate() for _ in range(3)]
    for delegate in waiting:
        context.queue.enqueue(delegate)

    spawned = context.queue.drain()

    assert [dialog.delegate for dialog in spawned] == waiting[:1]
    assert context.queue.pending() == [(waiting[1], None), (waiting[2], None)]


def test_drain_respects_vetoes(context, host, make_delegate, recorder):
    on_cancel = recorder()
    vetoed = make_delegate(on_cancel=on_cancel)
    context.queue.enqueue(vetoed)
    host.player_dead = True

    assert context.queue.drain() == []

    assert on_cancel.calls == [(None,)]
    assert len(context.queue) == 0
