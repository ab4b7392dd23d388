from .constant_folder import ConstantFoldingSimplifier

__all__ = ["ConstantFoldingSimplifier"]
