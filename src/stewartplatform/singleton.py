"""
Process-wide single instances, used for the shared log handlers.
"""

import threading
from typing import Any, Dict


class Singleton(type):
    """
    Metaclass returning the same instance on every call of the class.

    Creation is guarded by a lock, since a host may import the package from a
    render thread and a control thread at the same time.
    """

    _instances: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with Singleton._lock:
            if cls not in Singleton._instances:
                Singleton._instances[cls] = super().__call__(*args, **kwargs)
        return Singleton._instances[cls]


__all__ = [
    'Singleton',
]
