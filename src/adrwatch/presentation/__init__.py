"""Terminal presentation"""

from .dashboard import Dashboard

__all__ = ["Dashboard"]
