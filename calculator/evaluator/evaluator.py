import sys
from typing import Optional, TextIO, Tuple

from calculator.tree.printer import INDENT
from calculator.tree.tree import ASTNode, NodeType

from calculator.error.evaluator_error import (  # isort:skip
    DivisionByZeroError,
    InvalidLiteralError,
)


class Evaluator:
    """
    Tree-walking interpreter that reduces an AST to an integer.

    Every visited node prints a "Calculating" line before its children are evaluated,
    and a "Result" line with its value afterwards, indented by the depth of the node.
    """

    def __init__(self, program: str = "", out: Optional[TextIO] = None) -> None:
        self.og_program = program
        self.out = out

    def evaluate(self, node: ASTNode, indent: str = "") -> int:
        out = self.out or sys.stdout
        print(f"{indent}Calculating: {node.type}", file=out)

        match node.type:
            case NodeType.PROGRAM:
                # Only the value of the last child is kept
                result = 0
                for child in node.children:
                    result = self.evaluate(child, indent + INDENT)

            case NodeType.ADDITIVE:
                left, right = self.evaluate_operands(node, indent)
                if node.text == "+":
                    result = left + right
                else:
                    result = left - right

            case NodeType.MULTIPLICATIVE:
                left, right = self.evaluate_operands(node, indent)
                if node.text == "*":
                    result = left * right
                else:
                    result = self.divide(node, left, right)

            case NodeType.INT_LITERAL:
                if not (node.text.isascii() and node.text.isdigit()):
                    InvalidLiteralError(self.og_program, node)
                result = int(node.text, 10)

            case _:
                # Identifiers, declarations and the remaining node types have no value (yet)
                result = 0

        print(f"{indent}Result: {result}", file=out)
        return result

    def evaluate_operands(self, node: ASTNode, indent: str) -> Tuple[int, int]:
        left, right = node.children
        return (
            self.evaluate(left, indent + INDENT),
            self.evaluate(right, indent + INDENT),
        )

    def divide(self, node: ASTNode, left: int, right: int) -> int:
        """Integer division that truncates towards zero, e.g. -7 / 2 is -3."""
        if right == 0:
            DivisionByZeroError(self.og_program, node)

        quotient = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            return -quotient
        return quotient
