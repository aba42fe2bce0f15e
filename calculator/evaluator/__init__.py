from calculator.evaluator.evaluator import Evaluator
