"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирование номеров в отеле, включая:
- Проверку периода бронирования
- Поиск свободного номера и создание бронирования
- Поиск дат, когда заняты все номера
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'interfaces',
]
