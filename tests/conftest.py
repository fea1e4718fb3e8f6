"""
Общие фикстуры для тестов менеджера бронирований.

"Сегодня" зафиксировано на 2026-01-02, чтобы тесты не зависели от реальной даты.
"""
from datetime import date, datetime, timedelta

import pytest

from hotel_booking.booking.application import BookingManager
from hotel_booking.booking.domain import Booking, Room
from hotel_booking.booking.infrastructure import (
    InMemoryBookingRepository,
    InMemoryRoomRepository,
    SystemTime,
)

FIXED_TODAY = date(2026, 1, 2)


def _day(offset: int) -> date:
    return FIXED_TODAY + timedelta(days=offset)


@pytest.fixture
def day():
    """Дата со сдвигом в днях относительно зафиксированного "сегодня"."""
    return _day


@pytest.fixture
def clock() -> SystemTime:
    return SystemTime(datetime(2026, 1, 2, 9, 30))


@pytest.fixture
def today(clock: SystemTime) -> date:
    return clock.today()


@pytest.fixture
def rooms():
    return [Room(id=1, description="A"), Room(id=2, description="B")]


@pytest.fixture
def room_repo(rooms) -> InMemoryRoomRepository:
    return InMemoryRoomRepository(rooms)


@pytest.fixture
def booking_repo() -> InMemoryBookingRepository:
    """Номер 1 занят завтра; оба номера заняты с 10-го по 20-й день."""
    return InMemoryBookingRepository(
        [
            Booking(id=1, customer_id=1, room_id=1, start_date=_day(1), end_date=_day(1)),
            Booking(id=2, customer_id=1, room_id=1, start_date=_day(10), end_date=_day(20)),
            Booking(id=3, customer_id=2, room_id=2, start_date=_day(10), end_date=_day(20)),
        ]
    )


@pytest.fixture
def manager(booking_repo, room_repo, clock) -> BookingManager:
    return BookingManager(booking_repo, room_repo, clock)
