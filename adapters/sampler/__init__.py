from .function_sampler import FunctionSampler

__all__ = ["FunctionSampler"]
