"""
Настройки приложения.

Значения читаются из переменных окружения (и файла .env, если он есть).
"""

import os
from datetime import date
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "HOTEL_BOOKING_"


class Settings(BaseModel):
    """Настройки менеджера бронирований."""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    room_descriptions: List[str] = Field(default_factory=lambda: ["A", "B"])
    # Фиксирует "сегодня" для демонстраций и воспроизводимых прогонов
    today: Optional[date] = None

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level

    @field_validator("room_descriptions", mode="before")
    @classmethod
    def split_rooms(cls, v):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Собирает настройки из окружения; без environ подгружает .env."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None and raw != "":
                values[name] = raw
        # HOTEL_BOOKING_ROOMS короче, чем HOTEL_BOOKING_ROOM_DESCRIPTIONS
        rooms = environ.get(ENV_PREFIX + "ROOMS")
        if rooms:
            values.setdefault("room_descriptions", rooms)
        return cls(**values)
