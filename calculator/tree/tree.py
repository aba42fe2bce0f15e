from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeType(Enum):
    PROGRAM = "Program"
    INT_DECLARATION = "IntDeclaration"
    EXPRESSION = "Expression"
    ASSIGNMENT = "Assignment"
    PRIMARY = "Primary"
    MULTIPLICATIVE = "Multiplicative"
    ADDITIVE = "Additive"
    IDENTIFIER = "Identifier"
    INT_LITERAL = "IntLiteral"

    def __str__(self) -> str:
        return self.value


@dataclass
class ASTNode:
    type: NodeType
    text: str = ""
    children: List[ASTNode] = field(default_factory=list)
    # Weak reference to the parent, the parent owns its children and not the other way around
    _parent: Optional[weakref.ref] = field(
        repr=False, compare=False, default=None, init=False
    )

    @property
    def parent(self) -> Optional[ASTNode]:
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child: ASTNode) -> None:
        child._parent = weakref.ref(self)
        self.children.append(child)

    def __str__(self) -> str:
        from calculator.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __contains__(self, element: ASTNode) -> bool:
        if self == element:
            return True
        return any(element in child for child in self.children)

    def iter_children(self) -> Iterator[ASTNode]:
        yield from self.children
