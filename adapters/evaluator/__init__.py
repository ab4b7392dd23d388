from .float_evaluator import FloatEvaluator

__all__ = ["FloatEvaluator"]
