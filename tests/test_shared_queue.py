import queue
import threading

import pytest

from chronolog.shared_queue import SharedQueue


def test_new_queue_is_empty():
    q = SharedQueue()
    assert q.empty()
    assert len(q) == 0


def test_try_and_pop_on_empty_raises():
    q = SharedQueue()
    with pytest.raises(queue.Empty):
        q.try_and_pop()


def test_fifo_order():
    q = SharedQueue()
    for item in ["a", "b", "c"]:
        q.push(item)
    assert len(q) == 3
    assert [q.try_and_pop() for _ in range(3)] == ["a", "b", "c"]
    assert q.empty()


def test_none_is_a_valid_item():
    q = SharedQueue()
    q.push(None)
    assert q.try_and_pop() is None
    assert q.empty()


def test_wait_and_pop_returns_available_item():
    q = SharedQueue()
    q.push(7)
    assert q.wait_and_pop() == 7


def test_wait_and_pop_blocks_until_push():
    q = SharedQueue()
    received = []
    consumer = threading.Thread(target=lambda: received.append(q.wait_and_pop()))
    consumer.start()
    q.push("hello")
    consumer.join(timeout=5)
    assert not consumer.is_alive()
    assert received == ["hello"]


def test_many_producers_many_consumers():
    q = SharedQueue()
    producers = 4
    per_producer = 250
    received = []
    lock = threading.Lock()

    def produce(offset):
        for n in range(per_producer):
            q.push(offset * per_producer + n)

    def consume():
        for _ in range(per_producer):
            value = q.wait_and_pop()
            with lock:
                received.append(value)

    threads = [threading.Thread(target=consume) for _ in range(producers)]
    threads += [threading.Thread(target=produce, args=(i,)) for i in range(producers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert sorted(received) == list(range(producers * per_producer))
    assert q.empty()