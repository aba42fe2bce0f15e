from dataclasses import dataclass

from calculator.error.communicator import Communicator


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    pass


@dataclass
class CompilerError:
    program: str

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(self.program, class_name, before, after)


class UnrecoverableError(CompilerError):
    stage = CompilerException

    # Immediately raise the error, the calculator stops at the first error
    def __post_init__(self) -> None:
        Communicator.communicate(self.stage, self)
