"""
Доменная модель контекста бронирования.

Содержит сущности номера и бронирования, а также политику
проверки периода бронирования.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ..shared_kernel import (
    DateLike,
    DateRange,
    EntityId,
    InvalidDateRangeException,
    to_date,
)


class Room(BaseModel):
    """Номер в отеле. Справочные данные, ядро их не изменяет."""

    model_config = ConfigDict(frozen=True)

    id: EntityId
    description: str = ""


class Booking(BaseModel):
    """Бронирование номера в отеле."""

    id: Optional[EntityId] = None
    customer_id: EntityId
    # Назначается менеджером при создании бронирования
    room_id: Optional[EntityId] = None
    start_date: date
    end_date: date
    is_active: bool = True

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def strip_time(cls, v):
        # Время суток не учитывается
        return v.date() if isinstance(v, datetime) else v

    def overlaps(self, start: DateLike, end: DateLike) -> bool:
        """Проверяет, пересекается ли активное бронирование с периодом [start, end]."""
        return (
            self.is_active
            and self.start_date <= to_date(end)
            and self.end_date >= to_date(start)
        )

    def covers(self, day: DateLike) -> bool:
        """Проверяет, занимает ли активное бронирование номер в указанный день."""
        return self.overlaps(day, day)

    def cancel(self) -> None:
        """Отменяет бронирование; отмененные бронирования не занимают номер."""
        self.is_active = False


class BookingPolicy:
    """Политики и бизнес-правила для периода бронирования."""

    @classmethod
    def validate_booking_period(
        cls, start: DateLike, end: DateLike, today: date
    ) -> DateRange:
        """
        Проверяет период бронирования и возвращает его без времени суток.

        Raises:
            InvalidDateRangeException: если дата начала не в будущем
                или позже даты окончания.
        """
        start_date = to_date(start)
        end_date = to_date(end)

        # Дата заезда должна быть не раньше завтрашнего дня
        if start_date <= today:
            raise InvalidDateRangeException(
                f"Дата начала бронирования должна быть в будущем: {start_date}"
            )

        if start_date > end_date:
            raise InvalidDateRangeException(
                f"Дата начала {start_date} позже даты окончания {end_date}"
            )

        return DateRange(start=start_date, end=end_date)
