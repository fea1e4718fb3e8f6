"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, List, Protocol

from .domain import Booking, Room


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IClock(Protocol):
    """Источник текущего времени."""

    def now(self) -> datetime: ...
    def today(self) -> date: ...


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    async def get_all(self) -> List[Booking]: ...
    async def add(self, booking: Booking) -> None: ...


class IRoomRepository(Protocol):
    """Интерфейс репозитория для номеров."""

    async def get_all(self) -> List[Room]: ...
