from typing import Any, Dict, Optional

from .booking.application import BookingManager
from .booking.infrastructure import (
    InMemoryBookingRepository,
    InMemoryRoomRepository,
    StandardLogger,
    SystemTime,
)
from .config import Settings
from .logger import setup_logging


def bootstrap_app(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    # 1. Настройки и логирование
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    # 2. Часы; при заданной дате "сегодня" фиксируется
    clock = SystemTime()
    if settings.today is not None:
        clock.set(settings.today)

    # 3. Репозитории в памяти
    room_repo = InMemoryRoomRepository.from_descriptions(settings.room_descriptions)
    booking_repo = InMemoryBookingRepository()

    # 4. Менеджер бронирований
    booking_manager = BookingManager(
        booking_repository=booking_repo,
        room_repository=room_repo,
        clock=clock,
        logger=StandardLogger("hotel_booking.booking"),
    )

    return {
        "settings": settings,
        "clock": clock,
        "room_repo": room_repo,
        "booking_repo": booking_repo,
        "booking_manager": booking_manager,
    }
