from calculator.tree.printer import Printer
from calculator.tree.tree import ASTNode, NodeType
