"""
Тексты интерактивного слоя и форматирование расстояния.
"""

from typing import Final

INSTRUCTIONS: Final[str] = (
    "When inputting a path, enter an amount of steps to walk, and a direction immediately thereafter.\n"
    "There are no spaces between instructions.\n"
    "Valid directions are F(orward), B(ack), L(eft) or R(ight).\n"
    "An example is 1B2F3L4R, which means go 1 step back, 2 steps forward, 3 steps left, and 4 steps right.\n"
    "You will then be shown the euclidean distance from the starting point to the destination in steps, "
    "with no rounding.\n"
    "For 3F4R, the output would be 5 steps from the starting point."
)


def format_distance(distance: float) -> str:
    """
    Расстояние для показа пользователю, без округления.

    Целые значения без дробной части, остальные — кратчайший repr.

    Examples:
        >>> format_distance(5.0)
        '5'
        >>> format_distance(2 ** 0.5)
        '1.4142135623730951'
    """
    if distance.is_integer():
        return str(int(distance))
    return repr(distance)


def distance_message(distance: float) -> str:
    """Итоговое сообщение о расстоянии."""
    return f"There are {format_distance(distance)} steps from the starting point."
