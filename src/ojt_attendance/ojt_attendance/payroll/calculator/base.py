from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for paid hours)."""

    @abstractmethod
    def worked_hours(self, time_in: datetime, time_out: datetime) -> Decimal:
        raise NotImplementedError
