"""
Path — доменные модели маршрута

Immutable модели для закодированного маршрута вида {digits}{direction}:
- Direction: направление шага (F/B/L/R) с единичным вектором
- Token: один шаг маршрута (количество шагов + символ направления)
- Displacement: итоговое смещение (horizontal, vertical)

ИНВАРИАНТЫ:
1. magnitude токена непустая и состоит только из цифр 0-9
2. direction_char — ровно один символ из FfBbLlRr (регистр сохраняется)
3. Displacement неизменяем, distance() >= 0
"""

import math
from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Direction(str, Enum):
    """Направление шага"""

    FORWARD = "F"
    BACK = "B"
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """
        Направление по символу (регистр не важен).

        Args:
            char: Символ направления ('F', 'f', 'B', ...)

        Returns:
            Direction

        Raises:
            ValueError: Если символ не является направлением
        """
        return cls(char.upper())

    @property
    def unit_vector(self) -> tuple[int, int]:
        """
        Единичный шаг (dx, dy).

        FORWARD → +vertical, BACK → -vertical,
        RIGHT → +horizontal, LEFT → -horizontal.
        """
        return _UNIT_VECTORS[self]


_UNIT_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.FORWARD: (0, 1),
    Direction.BACK: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


# =============================================================================
# TOKEN
# =============================================================================


class Token(BaseModel):
    """
    Один шаг маршрута: количество шагов и направление.

    Immutable модель (frozen=True). magnitude хранится строкой цифр,
    как она была введена; числовое значение вычисляется калькулятором.
    """

    magnitude: str = Field(
        ..., min_length=1, pattern=r"^[0-9]+$", description="Количество шагов (цифры)"
    )
    direction_char: str = Field(
        ..., pattern=r"^[FfBbLlRr]$", description="Символ направления, как введён"
    )

    model_config = {"frozen": True}

    @property
    def direction(self) -> Direction:
        """Направление токена (без учёта регистра)"""
        return Direction.from_char(self.direction_char)

    @property
    def text(self) -> str:
        """Токен в исходной записи, например '3F'"""
        return f"{self.magnitude}{self.direction_char}"

    def __str__(self) -> str:
        return self.text


# =============================================================================
# DISPLACEMENT
# =============================================================================


class Displacement(BaseModel):
    """
    Итоговое смещение от начальной точки.

    horizontal: RIGHT положительно, LEFT отрицательно
    vertical: FORWARD положительно, BACK отрицательно
    """

    horizontal: float = Field(0.0, description="Смещение по горизонтали")
    vertical: float = Field(0.0, description="Смещение по вертикали")

    model_config = {"frozen": True}

    def distance(self) -> float:
        """
        Евклидово расстояние от начальной точки.

        Returns:
            sqrt(horizontal² + vertical²), без округления
        """
        # hypot не переполняется на промежуточном квадрате
        return math.hypot(self.horizontal, self.vertical)
