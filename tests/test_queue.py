import pytest

from config import MAX_CAPACITY
from engine import Recorder, QueueSession
from errors import QueueOverflowError, QueueUnderflowError, TraceInputError
from queues import BoundedQueue, parse_item
from queue_algorithms import require_queue_algorithm


def run(key, queue, **params):
    return Recorder().record(require_queue_algorithm(key), queue, **params)


def test_pointers_follow_contents(queue):
    assert (queue.front, queue.rear) == (0, 2)
    assert (BoundedQueue().front, BoundedQueue().rear) == (-1, -1)


def test_parse_item():
    assert parse_item(" 42 ") == 42
    assert parse_item("P3") == "P3"
    with pytest.raises(TraceInputError):
        parse_item("  ")


def test_enqueue_frames_walk_the_textbook_steps(queue):
    trace = run("enqueue", queue, value="40")
    assert [f.code_line for f in trace.timeline] == [0, 2, 3, 4, 4]
    assert trace.final.queue == (10, 20, 30, 40)
    assert trace.final.internal_state["rear"] == 3
    assert trace.error is None


def test_enqueue_into_empty_queue_initialises_front():
    trace = run("enqueue", BoundedQueue(), value=7)
    assert trace.timeline[1].description == "Initialize front = 0"


def test_enqueue_beyond_capacity_is_rejected():
    q = BoundedQueue(list(range(MAX_CAPACITY)))
    trace = run("enqueue", q, value=99)
    assert trace.final.description == "Error: Queue Overflow"
    assert trace.error is not None
    assert len(q) == MAX_CAPACITY


def test_dequeue_empty_queue_is_rejected():
    q = BoundedQueue()
    trace = run("dequeue", q)
    assert trace.final.description == "Error: Queue Underflow"
    assert trace.error is not None
    assert q.is_empty()


def test_dequeue_last_element_resets_pointers():
    q = BoundedQueue([5])
    trace = run("dequeue", q)
    assert trace.final.internal_state["front"] == -1
    assert trace.final.internal_state["rear"] == -1
    assert trace.final.description == 'Returned "5"'


def test_peek_does_not_change_queue(queue):
    trace = run("peek", queue)
    assert trace.final.description == 'Front value is "10"'
    assert queue.items == [10, 20, 30]


def test_create_truncates_to_size(queue):
    run("create", queue, size="3", values="1, 2, abc, 4")
    assert queue.items == [1, 2, "abc"]


def test_create_rejects_bad_size(queue):
    with pytest.raises(TraceInputError):
        run("create", queue, size=MAX_CAPACITY + 1)


def test_binary_numbers_output(queue):
    trace = run("binary_numbers", queue, n=5)
    assert trace.final.description == "First 5 binary numbers: 1, 10, 11, 100, 101"
    assert queue.items == [10, 20, 30]


def test_binary_numbers_input_range(queue):
    with pytest.raises(TraceInputError):
        run("binary_numbers", queue, n=0)
    with pytest.raises(TraceInputError):
        run("binary_numbers", queue, n=16)


def test_binary_numbers_at_capacity_limit(queue):
    trace = run("binary_numbers", queue, n=MAX_CAPACITY)
    assert all(len(f.queue) <= MAX_CAPACITY for f in trace.timeline)


def test_hot_potato_winner(queue):
    trace = run("hot_potato", queue, players=5, passes=1)
    assert trace.final.description == "P3 wins the game!"
    assert trace.final.queue == ("P3",)


def test_hot_potato_validates_inputs(queue):
    with pytest.raises(TraceInputError):
        run("hot_potato", queue, players=1, passes=1)
    with pytest.raises(TraceInputError):
        run("hot_potato", queue, players=4, passes=-1)


def test_session_reports_overflow_after_loading_trace():
    sess = QueueSession(BoundedQueue(list(range(MAX_CAPACITY))))
    with pytest.raises(QueueOverflowError):
        sess.run("enqueue", {"value": 1})
    assert sess.playback.trace is not None
    assert len(sess.queue) == MAX_CAPACITY


def test_session_reports_underflow():
    sess = QueueSession(BoundedQueue())
    with pytest.raises(QueueUnderflowError):
        sess.run("dequeue")
    assert sess.queue.is_empty()


def test_canvas_edits(queue):
    sess = QueueSession(queue, seed=1)
    sess.edit("enqueue")
    assert len(sess.queue) == 4
    sess.edit("update", {"index": 0, "value": "11"})
    assert sess.queue.items[0] == 11
    sess.edit("clear")
    with pytest.raises(QueueUnderflowError):
        sess.edit("dequeue")
