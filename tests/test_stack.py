import pytest

from dsreview.stack import Stack, StackEmptyError


def test_stack_operations():
    stack = Stack()
    assert stack.is_empty() is True
    stack.push(123)
    stack.push(456)
    assert stack.is_empty() is False
    assert stack.peek() == 456
    assert stack.pop() == 456
    assert stack.peek() == 123


def test_pop_until_empty():
    stack = Stack()
    for value in "abc":
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_peek_empty_raises():
    with pytest.raises(StackEmptyError, match="stack is empty"):
        Stack().peek()


def test_pop_empty_raises():
    stack = Stack()
    stack.push(1)
    stack.pop()
    with pytest.raises(StackEmptyError):
        stack.pop()