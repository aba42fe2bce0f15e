# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
    ) -> str:
        lines = program.splitlines()
        # Errors carry no location, so the full program is shown for context.
        # Determine the number of spaces between e.g. '8.' and the code, so that
        # the line numbers are right aligned:
        #     8. int a = 1;
        #    10. int b = 2;
        width = len(str(len(lines)))
        final_error_lines = [
            f"   {i:>{width}}. {line}" for i, line in enumerate(lines, start=1)
        ]

        message = class_name + ": " + before
        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Stops the calculator by raising the exception of the stage that failed
    @staticmethod
    def communicate(stage_of_exception, error) -> None:
        raise stage_of_exception(str(error))
