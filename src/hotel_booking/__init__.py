"""Менеджер бронирования номеров отеля."""

from .booking.application import NO_ROOM_AVAILABLE, BookingManager
from .booking.domain import Booking, Room
from .shared_kernel import InvalidDateRangeException

__all__ = [
    "BookingManager",
    "Booking",
    "Room",
    "InvalidDateRangeException",
    "NO_ROOM_AVAILABLE",
]
