import pytest

from dsakit.stacks import (
    ArrayStack,
    LinkedList,
    LinkedStack,
    QueueEmptyError,
    QueueFullError,
    StackOverflowError,
    StackUnderflowError,
    TwoStackQueue,
)


def test_array_stack_is_lifo():
    stack = ArrayStack(5)
    for value in [1, 2, 3]:
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_array_stack_default_capacity_overflows_after_ten():
    stack = ArrayStack()
    for value in range(10):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(10)
    assert len(stack) == 10


def test_array_stack_underflow():
    stack = ArrayStack(3)
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_array_stack_iterates_top_to_bottom_and_peeks():
    stack = ArrayStack(4)
    for value in [1, 2, 3]:
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert stack.peek() == 3
    assert len(stack) == 3


def test_array_stack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_linked_stack_lifo_and_iteration():
    stack = LinkedStack()
    for value in [4, 5, 6]:
        stack.push(value)
    assert list(stack) == [6, 5, 4]
    assert len(stack) == 3
    assert stack.pop() == 6
    assert list(stack) == [5, 4]


def test_linked_stack_underflow():
    stack = LinkedStack()
    assert stack.is_empty()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_two_stack_queue_is_fifo():
    queue = TwoStackQueue(5)
    for value in [1, 2, 3]:
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]
    assert queue.is_empty()


def test_two_stack_queue_full_and_empty():
    queue = TwoStackQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    with pytest.raises(QueueFullError):
        queue.enqueue("c")
    assert queue.dequeue() == "a"
    queue.enqueue("c")
    assert len(queue) == 2
    queue.dequeue()
    queue.dequeue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_queue_empty_error_is_index_error():
    with pytest.raises(IndexError):
        TwoStackQueue(1).dequeue()


def test_linked_list_append_and_display():
    items = LinkedList()
    for value in [1, 2, 3]:
        items.append(value)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3
    assert str(items) == "1 2 3"


def test_linked_list_from_values_round_trip():
    values = ["x", "y", "z", "w"]
    assert list(LinkedList(values)) == values
    assert str(LinkedList()) == ""
    assert len(LinkedList()) == 0