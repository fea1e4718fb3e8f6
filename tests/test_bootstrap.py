"""
Тесты сборки приложения.
"""
from datetime import date, timedelta

from hotel_booking.bootstrap import bootstrap_app
from hotel_booking.booking.application import BookingManager
from hotel_booking.booking.domain import Booking
from hotel_booking.config import Settings


async def test_bootstrap_wires_components():
    app = bootstrap_app(
        Settings(today=date(2026, 1, 2), room_descriptions=["A", "B", "C"])
    )

    assert isinstance(app["booking_manager"], BookingManager)
    assert app["clock"].today() == date(2026, 1, 2)
    assert len(await app["room_repo"].get_all()) == 3
    assert await app["booking_repo"].get_all() == []


async def test_bootstrapped_manager_books_rooms():
    app = bootstrap_app(Settings(today=date(2026, 1, 2), room_descriptions=["A"]))
    manager = app["booking_manager"]
    start = date(2026, 1, 5)
    end = start + timedelta(days=2)

    assert await manager.create_booking(Booking(customer_id=1, start_date=start, end_date=end))
    assert not await manager.create_booking(
        Booking(customer_id=2, start_date=start, end_date=end)
    )
    assert await manager.get_fully_occupied_dates(start, end) == [
        start,
        start + timedelta(days=1),
        end,
    ]


def test_bootstrap_without_pinned_date_uses_wall_clock():
    app = bootstrap_app(Settings())

    assert app["clock"].today() == date.today()
