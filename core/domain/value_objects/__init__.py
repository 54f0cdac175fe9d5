"""Domain value objects."""

from .value_objects import Caller, ExecutionID, Money, utc_now
from .order_number import OrderNumber

__all__ = [
    "Caller",
    "ExecutionID",
    "Money",
    "OrderNumber",
    "utc_now",
]
