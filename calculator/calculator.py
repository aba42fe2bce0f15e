import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from calculator.evaluator.evaluator import Evaluator
from calculator.parser.parser import Parser
from calculator.scanner.scanner import Scanner
from calculator.tree.tree import ASTNode

logger = logging.getLogger(__name__)

# Upper bound on the stack frames the parser and evaluator need per character,
# reached by e.g. "((((1))))" in the parser and "1+1+1" in the evaluator
FRAMES_PER_CHARACTER = 10


@contextmanager
def recursion_limit(script: str) -> Iterator[None]:
    """Raise the recursion limit for the duration of one run over `script`.

    Both the parser and the evaluator recurse once per nesting level, so the
    stack that is needed grows with the length of the script.
    """
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, FRAMES_PER_CHARACTER * len(script)))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Calculator:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out

    def parse(self, script: str) -> ASTNode:
        """Scan and parse `script` into an AST rooted at a Program node."""
        tokens = Scanner(script).tokenize()
        with recursion_limit(script):
            return Parser(script).parse(tokens)

    def execute(self, script: str) -> int:
        """Parse `script`, print its AST and the evaluation steps, and return the result.

        Nothing is printed if parsing fails, the ParserException propagates instead.

        Args:
            script (str): The expression to calculate, e.g. "2 + 3 * 5".

        Returns:
            int: The value of the expression.
        """
        tree = self.parse(script)
        print(tree, file=self.out)

        evaluator = Evaluator(script, out=self.out)
        with recursion_limit(script):
            result = evaluator.evaluate(tree)
        logger.debug("Evaluated %r to %d", script, result)
        return result
