import sys

from calculator.calculator import Calculator
from calculator.evaluator.evaluator import Evaluator
from calculator.parser.parser import Parser
from calculator.scanner.reader import TokenReader
from calculator.scanner.scanner import Scanner
from calculator.token import Token
from calculator.tree.tree import ASTNode, NodeType
from calculator.type import Type

# Default is 1000, every operator in a chain adds a few stack frames
sys.setrecursionlimit(5000)
