"""
Тесты для доменных моделей маршрута: Direction, Token, Displacement

Проверяет:
1. Разбор направления без учёта регистра
2. Единичные векторы направлений
3. Валидацию Token (Pydantic)
4. Immutability (frozen=True)
"""

import math

import pytest
from pydantic import ValidationError

from src.core.domain import Direction, Displacement, Token


# =============================================================================
# DIRECTION TESTS
# =============================================================================


class TestDirection:
    """Тесты для Direction"""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("F", Direction.FORWARD),
            ("f", Direction.FORWARD),
            ("B", Direction.BACK),
            ("b", Direction.BACK),
            ("L", Direction.LEFT),
            ("l", Direction.LEFT),
            ("R", Direction.RIGHT),
            ("r", Direction.RIGHT),
        ],
    )
    def test_from_char(self, char: str, expected: Direction) -> None:
        assert Direction.from_char(char) is expected

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Direction.from_char("X")

    def test_unit_vectors(self) -> None:
        """FORWARD +v, BACK -v, LEFT -h, RIGHT +h"""
        assert Direction.FORWARD.unit_vector == (0, 1)
        assert Direction.BACK.unit_vector == (0, -1)
        assert Direction.LEFT.unit_vector == (-1, 0)
        assert Direction.RIGHT.unit_vector == (1, 0)

    def test_opposites_cancel(self) -> None:
        for a, b in ((Direction.FORWARD, Direction.BACK), (Direction.LEFT, Direction.RIGHT)):
            ax, ay = a.unit_vector
            bx, by = b.unit_vector
            assert (ax + bx, ay + by) == (0, 0)


# =============================================================================
# TOKEN TESTS
# =============================================================================


class TestToken:
    """Тесты для модели Token"""

    def test_creation(self) -> None:
        token = Token(magnitude="12", direction_char="l")
        assert token.magnitude == "12"
        assert token.direction_char == "l"
        assert token.direction == Direction.LEFT
        assert token.text == "12l"
        assert str(token) == "12l"

    def test_immutable(self) -> None:
        token = Token(magnitude="3", direction_char="F")
        with pytest.raises(ValidationError):
            token.magnitude = "4"  # type: ignore

    def test_equality(self) -> None:
        assert Token(magnitude="3", direction_char="F") == Token(
            magnitude="3", direction_char="F"
        )
        assert Token(magnitude="3", direction_char="F") != Token(
            magnitude="3", direction_char="f"
        )

    @pytest.mark.parametrize("magnitude", ["", "1.5", "-1", "a", " 1"])
    def test_invalid_magnitude(self, magnitude: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Token(magnitude=magnitude, direction_char="F")
        assert "magnitude" in str(exc_info.value)

    @pytest.mark.parametrize("direction_char", ["", "X", "FF", "1", " "])
    def test_invalid_direction(self, direction_char: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Token(magnitude="1", direction_char=direction_char)
        assert "direction_char" in str(exc_info.value)

    def test_json_roundtrip(self) -> None:
        token = Token(magnitude="7", direction_char="r")
        assert Token.model_validate_json(token.model_dump_json()) == token


# =============================================================================
# DISPLACEMENT TESTS
# =============================================================================


class TestDisplacement:
    """Тесты для модели Displacement"""

    def test_defaults_at_origin(self) -> None:
        displacement = Displacement()
        assert displacement.horizontal == 0.0
        assert displacement.vertical == 0.0
        assert displacement.distance() == 0.0

    def test_distance(self) -> None:
        assert Displacement(horizontal=3.0, vertical=4.0).distance() == 5.0
        assert Displacement(horizontal=-3.0, vertical=-4.0).distance() == 5.0

    def test_distance_sqrt_two(self) -> None:
        assert Displacement(horizontal=1.0, vertical=1.0).distance() == pytest.approx(
            math.sqrt(2)
        )

    def test_immutable(self) -> None:
        displacement = Displacement(horizontal=1.0, vertical=2.0)
        with pytest.raises(ValidationError):
            displacement.vertical = 0.0  # type: ignore
