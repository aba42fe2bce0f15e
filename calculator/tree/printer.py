from typing import Iterator

from calculator.tree.tree import ASTNode

INDENT = " " * 4


class Printer:
    """
    Dumps a tree with one line per node, indented by the depth of the node:

    >>> print(Printer().print(tree))
    Program
        Additive +
            IntLiteral 2
            IntLiteral 3
    """

    def __init__(self, indent: str = INDENT) -> None:
        self.indent = indent

    def print(self, tree: ASTNode) -> str:
        return "\n".join(self.lines(tree))

    def lines(self, tree: ASTNode) -> Iterator[str]:
        # Pre-order walk with an explicit stack, so the depth of the tree is not
        # bounded by the interpreter stack
        stack = [(tree, 0)]
        while stack:
            node, depth = stack.pop()
            yield f"{self.indent * depth}{node.type} {node.text}".rstrip()
            stack.extend((child, depth + 1) for child in reversed(node.children))
