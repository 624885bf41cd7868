import io

import pytest

from algokit.containers import BoundedQueue, LinkedStack, main


def test_stack_is_lifo():
    stack = LinkedStack()
    pushed = [11, 22, 33, 44]
    for value in pushed:
        stack.push(value)
    assert list(stack) == pushed[::-1]
    assert len(stack) == len(pushed)
    assert [stack.pop() for _ in pushed] == pushed[::-1]
    assert stack.is_empty()


def test_stack_peek_leaves_value():
    stack = LinkedStack()
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert len(stack) == 2
    stack.pop()
    assert stack.peek() == "a"


def test_stack_empty_errors():
    stack = LinkedStack()
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_queue_is_fifo():
    queue = BoundedQueue(5)
    items = [3, 1, 4]
    for item in items:
        queue.insert(item)
    assert list(queue) == items
    assert [queue.delete() for _ in items] == items
    assert queue.is_empty()
    assert len(queue) == 0


def test_queue_full():
    queue = BoundedQueue(2)
    queue.insert(1)
    queue.insert(2)
    with pytest.raises(OverflowError):
        queue.insert(3)


def test_queue_slots_reclaimed_only_when_empty():
    queue = BoundedQueue(2)
    queue.insert(1)
    queue.insert(2)
    queue.delete()
    with pytest.raises(OverflowError):
        queue.insert(3)
    queue.delete()
    queue.insert(4)
    queue.insert(5)
    assert list(queue) == [4, 5]


def test_queue_delete_empty():
    with pytest.raises(IndexError):
        BoundedQueue(1).delete()


def test_queue_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(0)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n1\n7\n3\n2\n3\n9\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "the elements of queue are 5 7" in out
    assert "the element deleted is =5" in out
    assert "the elements of queue are 7" in out
    assert "incorrect choice" in out


def test_main_full_and_empty(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n1\n1\n1\n2\n"))
    assert main(["--capacity", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("queue empty") == 2
    assert "queue is full" in out


def test_main_bad_capacity(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["--capacity", "0"])