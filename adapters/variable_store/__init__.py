from .dict_variable_store import DictVariableStore

__all__ = ["DictVariableStore"]
