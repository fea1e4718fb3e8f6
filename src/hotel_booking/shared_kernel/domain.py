"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime, timedelta
from typing import Iterator, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# Идентификаторы номеров и бронирований - целые числа
EntityId = int

DateLike = Union[date, datetime]


def to_date(value: DateLike) -> date:
    """Отбрасывает время суток, оставляя только календарную дату."""
    if isinstance(value, datetime):
        return value.date()
    return value


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Перебирает календарные дни от start до end включительно."""
    first = to_date(start)
    last = to_date(end)
    # Без шага за последний день: date.max + 1 день не существует
    for offset in range((last - first).days + 1):
        yield first + timedelta(days=offset)


class DateRange(BaseModel):
    """Диапазон дат, обе границы включительно."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @field_validator("start", "end", mode="before")
    @classmethod
    def strip_time(cls, v):
        return to_date(v) if isinstance(v, datetime) else v

    @model_validator(mode="after")
    def end_not_before_start(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError("Дата окончания не может быть раньше даты начала")
        return self


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class InvalidDateRangeException(BusinessRuleValidationException, ValueError):
    """Некорректный период: начало не в будущем или позже окончания."""

    pass


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now()
