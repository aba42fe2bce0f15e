from calculator.parser.parser import Parser
