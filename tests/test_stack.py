import pytest

from adventsolver.stack import Stack


def test_push_and_pop_are_last_in_first_out():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    stack.push("c")
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = Stack()
    stack.push(10)
    stack.push(20)
    assert stack.peek() == 20
    assert stack.peek() == 20
    assert len(stack) == 2


def test_is_empty_tracks_contents():
    stack = Stack()
    assert stack.is_empty() is True
    stack.push(1)
    assert stack.is_empty() is False
    stack.pop()
    assert stack.is_empty() is True


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_move_one_to_moves_top_item():
    source = Stack()
    target = Stack()
    source.push("x")
    source.push("y")
    target.push("z")
    source.move_one_to(target)
    assert target.peek() == "y"
    assert len(target) == 2
    assert source.peek() == "x"
    assert len(source) == 1


def test_move_one_to_from_empty_raises_and_leaves_target():
    source = Stack()
    target = Stack()
    target.push("z")
    with pytest.raises(IndexError, match="stack is empty"):
        source.move_one_to(target)
    assert len(target) == 1
    assert target.peek() == "z"