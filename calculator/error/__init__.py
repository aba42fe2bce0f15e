from calculator.error.error import CompilerError, CompilerException
from calculator.error.evaluator_error import EvaluatorException
from calculator.error.parser_error import ParserException
