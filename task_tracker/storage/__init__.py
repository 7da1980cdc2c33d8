"""
Storage layer.
Provides durable load/save of the task document.
"""
from .json_store import TaskStore, atomic_write

__all__ = [
    'TaskStore',
    'atomic_write',
]
