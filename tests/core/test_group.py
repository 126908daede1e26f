import threading
import pytest
from commander.core.commands import (
    BlockCommand,
    CommandState,
    GroupCommand,
    SetPropertyCommand,
)

def test_group_executes_children_in_order():
    calls = []
    group = GroupCommand([
        BlockCommand(lambda: calls.append(1), lambda: calls.append(-1)),
        BlockCommand(lambda: calls.append(2), lambda: calls.append(-2)),
        BlockCommand(lambda: calls.append(3), lambda: calls.append(-3)),
    ])

    group.invoke()

    assert calls == [1, 2, 3]
    assert group.state is CommandState.FINISHED

def test_group_inverse_reverses_and_inverts_children():
    calls = []
    group = GroupCommand([
        BlockCommand(lambda: calls.append(1), lambda: calls.append(-1)),
        BlockCommand(lambda: calls.append(2), lambda: calls.append(-2)),
    ], "Pair")

    inverse = group.inversed()
    inverse.invoke()

    assert calls == [-2, -1]
    assert inverse.description == "Undo Pair"
    assert len(inverse) == 2
    # Original untouched
    assert group.state is CommandState.READY

def test_group_identity_law(make_move, shape):
    move = make_move(shape, 10, 5)
    group = GroupCommand([move, move.inversed()])

    group.invoke()

    assert shape.center == (0, 0)
    assert group.state is CommandState.FINISHED

def test_group_double_application_inverse(make_move, shape):
    move = make_move(shape, 10, 5)
    shape.center = (20, 10)

    GroupCommand([move, move]).inversed().invoke()

    assert shape.center == (0, 0)

def test_group_undoes_dependent_effects(shape):
    # Rename twice; undo must restore in reverse order
    first = SetPropertyCommand(shape, "title", "A")
    group = GroupCommand([first])
    group.invoke()
    second = SetPropertyCommand(shape, "title", "B")
    combined = GroupCommand([first, second])

    combined.inversed().invoke()

    assert shape.title == ""

def test_empty_group_is_finished_noop():
    group = GroupCommand([])

    group.invoke()

    assert group.state is CommandState.FINISHED
    assert group.is_asynchronous is False
    assert group.is_mutating is False

def test_group_flags_derived_from_children():
    reader = BlockCommand(lambda: None, lambda: None, is_mutating=False)
    writer = BlockCommand(lambda: None, lambda: None, is_mutating=True)

    assert GroupCommand([reader]).is_mutating is False
    assert GroupCommand([reader, writer]).is_mutating is True
    assert GroupCommand([reader], is_mutating=True).is_mutating is True

def test_async_group_finishes_after_all_children():
    finishers = []
    sync_calls = []
    group = GroupCommand([
        BlockCommand(finishers.append, finishers.append, is_asynchronous=True),
        BlockCommand(lambda: sync_calls.append("sync"), lambda: None),
        BlockCommand(finishers.append, finishers.append, is_asynchronous=True),
    ])
    assert group.is_asynchronous is True

    group.invoke()

    assert sync_calls == ["sync"]
    assert group.state is CommandState.EXECUTING

    finishers[0]()
    assert group.state is CommandState.EXECUTING

    finishers[1]()
    assert group.state is CommandState.FINISHED

def test_async_group_child_finishing_immediately_waits_for_later_children():
    order = []

    def instant(finish):
        order.append("async")
        finish()

    group = GroupCommand([
        BlockCommand(instant, instant, is_asynchronous=True),
        BlockCommand(lambda: order.append("sync"), lambda: None),
    ])
    group.finished.connect(lambda cmd: order.append("group finished"))

    group.invoke()

    assert order == ["async", "sync", "group finished"]
    assert group.state is CommandState.FINISHED

def test_async_group_with_worker_threads(counter):
    def make_async(amount):
        def start(finish):
            def work():
                counter.add(amount)
                finish()
            threading.Thread(target=work).start()
        def start_inverse(finish):
            def work():
                counter.add(-amount)
                finish()
            threading.Thread(target=work).start()
        return BlockCommand(start, start_inverse, is_asynchronous=True)

    group = GroupCommand([make_async(i) for i in range(1, 6)])
    group.invoke()
    assert group.wait(timeout=5)
    assert counter.value == 15

    inverse = group.inversed()
    inverse.invoke()
    assert inverse.wait(timeout=5)
    assert counter.value == 0

def test_group_child_failure_propagates():
    def broken():
        raise RuntimeError("child failed")

    group = GroupCommand([BlockCommand(broken, lambda: None)])

    with pytest.raises(RuntimeError):
        group.invoke()

    assert group.state is CommandState.READY

def test_async_group_with_repeated_child_finishes():
    runs = []

    def instant(finish):
        runs.append("run")
        finish()

    child = BlockCommand(instant, instant, is_asynchronous=True)
    group = GroupCommand([child, child])

    group.invoke()

    assert runs == ["run", "run"]
    assert group.state is CommandState.FINISHED
    assert child.state is CommandState.FINISHED
    # Group subscriptions are released once the run is done
    assert child.finished.subscriber_count == 0

def test_async_group_repeated_child_can_run_again():
    def instant(finish):
        finish()

    child = BlockCommand(instant, instant, is_asynchronous=True)
    group = GroupCommand([child, child])

    group.invoke()
    group.invoke()
    group.inversed().invoke()

    assert group.state is CommandState.FINISHED
