from .command_interpreter import CommandInterpreter

__all__ = ["CommandInterpreter"]
