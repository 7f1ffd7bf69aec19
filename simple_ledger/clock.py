"""
Clock Module

Time source abstraction for the ledger. Accounts never call
datetime.now() directly; they ask an injected Clock so that operation
timestamps can be pinned in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone, timedelta, tzinfo
from typing import Optional


class ClockNotInitializedError(RuntimeError):
    """Raised when a MutableClock is read before any time was set"""
    
    def __init__(self):
        super().__init__(
            "Time has not been set on MutableClock. Call set_time() before the operation."
        )


class Clock(ABC):
    """Abstract time source"""
    
    @abstractmethod
    def now(self) -> datetime:
        """Return the current timestamp"""
        pass


class SystemClock(Clock):
    """Wall-clock time, timezone-aware (UTC unless told otherwise)"""
    
    def __init__(self, tz: tzinfo = timezone.utc):
        self.tz = tz
    
    def now(self) -> datetime:
        return datetime.now(self.tz)


class MutableClock(Clock):
    """
    Controllable clock for tests.
    
    now() returns whatever was last passed to set_time(). There is no
    implicit default: reading the clock before setting it raises
    ClockNotInitializedError, so every test states the time it expects.
    """
    
    def __init__(self, initial: Optional[datetime] = None):
        self._current_time = initial
    
    @property
    def is_set(self) -> bool:
        """Check if a timestamp has been set"""
        return self._current_time is not None
    
    def set_time(self, value: datetime) -> None:
        """Set the timestamp returned by subsequent now() calls"""
        self._current_time = value
    
    def advance(self, delta: timedelta) -> datetime:
        """
        Move the stored time forward
        
        Args:
            delta: Amount of time to add (negative deltas move backwards)
            
        Returns:
            The new current time
            
        Raises:
            ClockNotInitializedError: If no time has been set yet
        """
        self._current_time = self.now() + delta
        return self._current_time
    
    def now(self) -> datetime:
        if self._current_time is None:
            raise ClockNotInitializedError()
        return self._current_time
