"""
Прикладной слой контекста бронирования.

Содержит менеджер бронирований, который координирует работу
репозиториев, часов и доменной модели.
"""

import asyncio
from collections import Counter
from datetime import date
from typing import Dict, List, Optional, Set

from ..shared_kernel import DateLike, EntityId, iter_days
from . import interfaces as ports
from .domain import Booking, BookingPolicy
from .infrastructure import StandardLogger, SystemTime

# Номер не найден - обычный результат, а не ошибка
NO_ROOM_AVAILABLE = -1


class BookingManager:
    """Менеджер бронирований: поиск свободного номера, бронирование, загрузка."""

    def __init__(
        self,
        booking_repository: ports.IBookingRepository,
        room_repository: ports.IRoomRepository,
        clock: Optional[ports.IClock] = None,
        logger: Optional[ports.ILogger] = None,
    ):
        """Инициализирует менеджер."""
        self._bookings = booking_repository
        self._rooms = room_repository
        self._clock = clock or SystemTime()
        self._logger = logger or StandardLogger(__name__)
        # Поиск номера и запись бронирования выполняются атомарно
        self._lock = asyncio.Lock()

    async def find_available_room(self, start_date: DateLike, end_date: DateLike) -> int:
        """
        Ищет первый номер без активных бронирований на период [start_date, end_date].

        Returns:
            Идентификатор номера или NO_ROOM_AVAILABLE (-1).

        Raises:
            InvalidDateRangeException: если дата начала не в будущем
                или позже даты окончания.
        """
        period = BookingPolicy.validate_booking_period(
            start_date, end_date, self._clock.today()
        )

        bookings = await self._bookings.get_all()
        for room in await self._rooms.get_all():
            if not any(
                b.room_id == room.id and b.overlaps(period.start, period.end)
                for b in bookings
            ):
                self._logger.debug(
                    "Найден свободный номер",
                    room_id=room.id,
                    start=period.start,
                    end=period.end,
                )
                return room.id

        self._logger.debug(
            "Свободных номеров нет", start=period.start, end=period.end
        )
        return NO_ROOM_AVAILABLE

    async def create_booking(self, booking: Booking) -> bool:
        """
        Создает бронирование, если на его период есть свободный номер.

        Номер назначается по результату поиска, переданный room_id перезаписывается.
        """
        async with self._lock:
            room_id = await self.find_available_room(
                booking.start_date, booking.end_date
            )
            if room_id == NO_ROOM_AVAILABLE:
                self._logger.warning(
                    "Бронирование отклонено: нет свободных номеров",
                    customer_id=booking.customer_id,
                    start=booking.start_date,
                    end=booking.end_date,
                )
                return False

            previous_room_id = booking.room_id
            booking.room_id = room_id
            try:
                await self._bookings.add(booking)
            except Exception:
                # Несохраненное бронирование не должно получить номер
                booking.room_id = previous_room_id
                raise

        self._logger.info(
            "Бронирование создано",
            booking_id=booking.id,
            customer_id=booking.customer_id,
            room_id=room_id,
            start=booking.start_date,
            end=booking.end_date,
        )
        return True

    async def get_fully_occupied_dates(
        self, start_date: DateLike, end_date: DateLike
    ) -> List[date]:
        """Возвращает по возрастанию даты, в которые заняты все номера."""
        rooms = await self._rooms.get_all()
        if not rooms:
            return []

        room_ids = {room.id for room in rooms}
        active = [b for b in await self._bookings.get_all() if b.is_active]

        fully_occupied = []
        for day in iter_days(start_date, end_date):
            covering = [
                b.room_id for b in active if b.room_id in room_ids and b.covers(day)
            ]
            occupied: Set[EntityId] = set(covering)
            if len(covering) > len(occupied):
                self._warn_double_booking(day, covering)
            if occupied == room_ids:
                fully_occupied.append(day)

        return fully_occupied

    def _warn_double_booking(self, day: date, covering: List[EntityId]) -> None:
        counts: Dict[EntityId, int] = Counter(covering)
        duplicated = sorted(room_id for room_id, count in counts.items() if count > 1)
        self._logger.warning(
            "Обнаружено двойное бронирование", day=day, room_ids=duplicated
        )
