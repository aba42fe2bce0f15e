from typing import List, Optional

from calculator.token import Token


class TokenReader:
    """
    A stream over the tokens of one program, used by the parser for lookahead.
    Only the reading position changes, the tokens themselves are never modified.
    """

    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        # Pointer used with `self.tokens`
        self.i = 0

    def __len__(self) -> int:
        return len(self.tokens)

    def peek(self) -> Optional[Token]:
        """Return the next token without consuming it, or None if the stream is exhausted."""
        if self.i < len(self.tokens):
            return self.tokens[self.i]
        return None

    def read(self) -> Optional[Token]:
        """Consume and return the next token, or None if the stream is exhausted."""
        if self.i < len(self.tokens):
            try:
                return self.tokens[self.i]
            finally:
                self.i += 1
        return None

    def unread(self) -> None:
        if self.i > 0:
            self.i -= 1

    def position(self) -> int:
        return self.i

    def set_position(self, position: int) -> None:
        if not 0 <= position <= len(self.tokens):
            raise ValueError(
                f"Position {position} is outside of the token stream [0, {len(self.tokens)}]."
            )
        self.i = position
