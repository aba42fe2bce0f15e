from dataclasses import dataclass

from calculator.error.error import CompilerException, UnrecoverableError
from calculator.tree.tree import ASTNode


class EvaluatorException(CompilerException):
    pass


@dataclass
class EvaluatorError(UnrecoverableError):
    node: ASTNode

    stage = EvaluatorException

    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="EvaluatorError", after=after)


class DivisionByZeroError(EvaluatorError):
    def __str__(self) -> str:
        return self.create_error(
            f"Division by zero in {self.node.type} expression {self.node.text!r}."
        )


class InvalidLiteralError(EvaluatorError):
    def __str__(self) -> str:
        return self.create_error(
            f"The {self.node.type} {self.node.text!r} is not a base-10 integer."
        )
