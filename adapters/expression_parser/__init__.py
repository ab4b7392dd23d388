from .infix_parser import InfixExpressionParser

__all__ = ["InfixExpressionParser"]
