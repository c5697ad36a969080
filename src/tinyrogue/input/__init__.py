from .mapping import KeyMapper, iter_keys

__all__ = ["KeyMapper", "iter_keys"]
