import pytest

from calculator import Token, TokenReader, Type

tokens = [
    Token("1", Type.DIGIT),
    Token("+", Type.PLUS),
    Token("2", Type.DIGIT),
]


def test_read():
    reader = TokenReader(tokens)
    assert reader.read() == Token("1", Type.DIGIT)
    assert reader.read() == Token("+", Type.PLUS)
    assert reader.read() == Token("2", Type.DIGIT)
    assert reader.read() is None
    # Reading past the end does not move the position further
    assert reader.read() is None
    assert reader.position() == 3


def test_peek_does_not_consume():
    reader = TokenReader(tokens)
    assert reader.peek() == Token("1", Type.DIGIT)
    assert reader.peek() == Token("1", Type.DIGIT)
    assert reader.position() == 0


def test_peek_at_end():
    reader = TokenReader(tokens)
    reader.set_position(3)
    assert reader.peek() is None


def test_empty():
    reader = TokenReader([])
    assert len(reader) == 0
    assert reader.peek() is None
    assert reader.read() is None
    assert reader.position() == 0


def test_unread():
    reader = TokenReader(tokens)
    reader.read()
    reader.read()
    reader.unread()
    assert reader.position() == 1
    assert reader.read() == Token("+", Type.PLUS)


def test_unread_at_start():
    reader = TokenReader(tokens)
    reader.unread()
    assert reader.position() == 0
    assert reader.peek() == Token("1", Type.DIGIT)


def test_backtracking():
    reader = TokenReader(tokens)
    reader.read()
    saved = reader.position()
    reader.read()
    reader.read()
    reader.set_position(saved)
    assert reader.read() == Token("+", Type.PLUS)


def test_tokens_are_shared():
    reader = TokenReader(tokens)
    while reader.read():
        pass
    assert reader.tokens is tokens
    assert len(tokens) == 3


@pytest.mark.parametrize("position", [-1, 4, 100])
def test_set_position_out_of_range(position: int):
    reader = TokenReader(tokens)
    reader.read()
    with pytest.raises(ValueError):
        reader.set_position(position)
    # The position is left untouched
    assert reader.position() == 1
    assert reader.peek() == Token("+", Type.PLUS)


def test_set_position_bounds():
    reader = TokenReader(tokens)
    reader.set_position(3)
    assert reader.read() is None
    reader.set_position(0)
    assert reader.read() == Token("1", Type.DIGIT)
