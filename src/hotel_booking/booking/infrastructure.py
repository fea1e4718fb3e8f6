"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев, часов и логгера,
зависимые от конкретных технологий (память процесса, модуль logging).
"""
import json
import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..shared_kernel import EntityId, now
from . import interfaces as ports
from .domain import Booking, Room

DEFAULT_ROOM_DESCRIPTIONS: Sequence[str] = ("A", "B")


class SystemTime(ports.IClock):
    """Системные часы, которые можно зафиксировать на нужной дате."""

    def __init__(self, custom: Optional[datetime] = None):
        self._date: Optional[datetime] = None
        if custom is not None:
            self.set(custom)

    def set(self, custom: datetime) -> None:
        # Дата без времени превращается в полночь этого дня
        if not isinstance(custom, datetime):
            custom = datetime(custom.year, custom.month, custom.day)
        self._date = custom

    def reset(self) -> None:
        self._date = None

    def now(self) -> datetime:
        return self._date if self._date is not None else now()

    def today(self) -> date:
        return self.now().date()


class InMemoryBookingRepository(ports.IBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    def __init__(self, bookings: Optional[Iterable[Booking]] = None):
        self._bookings: List[Booking] = []
        self._next_id = 1
        for booking in bookings or ():
            self._append(booking)

    def _append(self, booking: Booking) -> None:
        if booking.id is None:
            booking.id = self._next_id
        elif any(b.id == booking.id for b in self._bookings):
            raise ValueError(f"Booking with id {booking.id} already exists")
        self._next_id = max(self._next_id, booking.id + 1)
        self._bookings.append(booking)

    async def get_all(self) -> List[Booking]:
        return list(self._bookings)

    async def get_by_id(self, booking_id: EntityId) -> Booking:
        for booking in self._bookings:
            if booking.id == booking_id:
                return booking
        raise KeyError(f"Booking with id {booking_id} not found")

    async def add(self, booking: Booking) -> None:
        self._append(booking)


class InMemoryRoomRepository(ports.IRoomRepository):
    """Реализация репозитория номеров в памяти."""

    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self._rooms: Dict[EntityId, Room] = {}
        if rooms is None:
            self._initialize_sample_data(DEFAULT_ROOM_DESCRIPTIONS)
        else:
            for room in rooms:
                self._add(room)

    @classmethod
    def from_descriptions(cls, descriptions: Iterable[str]) -> "InMemoryRoomRepository":
        """Создает репозиторий с номерами 1..N по списку описаний."""
        repository = cls(rooms=[])
        repository._initialize_sample_data(descriptions)
        return repository

    def _initialize_sample_data(self, descriptions: Iterable[str]) -> None:
        """Инициализирует тестовые данные."""
        for number, description in enumerate(descriptions, start=1):
            self._add(Room(id=number, description=description))

    def _add(self, room: Room) -> None:
        if room.id in self._rooms:
            raise ValueError(f"Room with id {room.id} already exists")
        self._rooms[room.id] = room

    async def get_all(self) -> List[Room]:
        # Порядок вставки сохраняется
        return list(self._rooms.values())

    async def get_by_id(self, room_id: EntityId) -> Room:
        if room_id not in self._rooms:
            raise KeyError(f"Room with id {room_id} not found")
        return self._rooms[room_id]


class StandardLogger(ports.ILogger):
    """Логгер поверх стандартного модуля logging; контекст пишется как JSON."""

    def __init__(self, name: str = "hotel_booking"):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, context: Dict[str, Any]) -> None:
        if context:
            message = f"{message} | {json.dumps(context, default=str, ensure_ascii=False)}"
        self._logger.log(level, message)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)
