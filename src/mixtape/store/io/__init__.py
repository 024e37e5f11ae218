from .json_store import JsonItemStore

__all__ = ["JsonItemStore"]
