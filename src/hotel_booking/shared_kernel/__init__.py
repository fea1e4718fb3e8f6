"""
Общее ядро (Shared Kernel) системы бронирования отеля.

Содержит общие типы данных и утилиты, используемые контекстом бронирования.
"""

from .domain import (
    BusinessRuleValidationException,
    DateLike,
    DateRange,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    InvalidDateRangeException,
    iter_days,
    # Утилиты
    now,
    to_date,
)

__all__ = [
    # Базовые типы
    "EntityId",
    "DateLike",
    "DateRange",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "InvalidDateRangeException",
    # Утилиты
    "to_date",
    "iter_days",
    "now",
]
