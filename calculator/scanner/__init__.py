from calculator.scanner.reader import TokenReader
from calculator.scanner.scanner import Scanner
