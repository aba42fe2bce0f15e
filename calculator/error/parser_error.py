from dataclasses import dataclass
from typing import Optional

from calculator.error.error import CompilerException, UnrecoverableError
from calculator.token import Token


class ParserException(CompilerException):
    pass


@dataclass
class ParseError(UnrecoverableError):
    nt: str
    expected: str
    got: Optional[Token]

    stage = ParserException

    @property
    def str_nt(self) -> str:
        match self.nt:
            case "additive":
                return "additive expression"
            case "multiplicative":
                return "multiplicative expression"
            case "primary":
                return "primary expression"
            case "intDeclare":
                return "integer declaration"
            case _:
                raise Exception(
                    f"Attempted to print out {self.nt!r} as extended string, but no such format exists."
                )

    def __str__(self) -> str:
        if self.got:
            after = f"Got {self.got.type.article_str()} {self.got.text!r} instead."
        else:
            after = "Reached the end of the program instead."

        return self.create_error(
            f"Invalid {self.str_nt} ({self.nt}), expecting {self.expected}.",
            after,
            class_name="SyntaxError",
        )
