"""
Displacement — расчёт смещения и евклидова расстояния

Сворачивает последовательность Token в смещение (horizontal, vertical)
и расстояние от начальной точки:

    FORWARD → vertical += m      BACK → vertical -= m
    RIGHT   → horizontal += m    LEFT → horizontal -= m

    distance = sqrt(horizontal² + vertical²)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат не зависит от порядка токенов
2. Нечисловая magnitude — ошибка (MagnitudeParseError), не ноль
3. Округление не применяется, double precision
4. Пустая последовательность → 0.0
5. Смещение копится точно (int), поэтому переполнение float
   определяется только итоговым значением, а не порядком шагов
"""

import logging
import math
from typing import Iterable

from src.core.domain.path import Displacement, Token
from src.core.parsing.errors import DisplacementOverflowError, MagnitudeParseError
from src.core.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)

_DECIMAL_DIGITS = frozenset("0123456789")


def parse_magnitude(text: str) -> float:
    """
    Разбор количества шагов.

    Args:
        text: Строка цифр 0-9

    Returns:
        Неотрицательное конечное число

    Raises:
        MagnitudeParseError: Пустая строка, нецифровые символы
            или переполнение (inf)

    Examples:
        >>> parse_magnitude("42")
        42.0
        >>> parse_magnitude("007")
        7.0
    """
    if not text or not set(text) <= _DECIMAL_DIGITS:
        raise MagnitudeParseError(text)

    value = float(text)
    if not math.isfinite(value):
        raise MagnitudeParseError(text)

    return value


def compute_displacement(tokens: Iterable[Token]) -> Displacement:
    """
    Итоговое смещение после выполнения всех шагов.

    Args:
        tokens: Последовательность токенов (валидированная токенизатором)

    Returns:
        Displacement(horizontal, vertical)

    Raises:
        MagnitudeParseError: Если magnitude токена не разбирается
        DisplacementOverflowError: Если итоговое смещение не представимо float
    """
    horizontal = 0
    vertical = 0

    for token in tokens:
        # parse_magnitude гарантирует цифры и конечность, дальше точный int;
        # без ведущих нулей значащих цифр не больше ~309
        parse_magnitude(token.magnitude)
        steps = int(token.magnitude.lstrip("0") or "0")
        dx, dy = token.direction.unit_vector
        horizontal += dx * steps
        vertical += dy * steps

    try:
        return Displacement(horizontal=float(horizontal), vertical=float(vertical))
    except OverflowError:
        raise DisplacementOverflowError() from None


def checked_distance(displacement: Displacement) -> float:
    """
    Расстояние для смещения, с проверкой на конечность.

    Raises:
        DisplacementOverflowError: Если расстояние не представимо конечным float
    """
    try:
        distance = displacement.distance()
    except OverflowError:
        raise DisplacementOverflowError() from None
    if not math.isfinite(distance):
        raise DisplacementOverflowError()
    return distance


def compute_distance(tokens: Iterable[Token]) -> float:
    """
    Евклидово расстояние от начальной точки.

    Args:
        tokens: Последовательность токенов

    Returns:
        sqrt(horizontal² + vertical²)

    Raises:
        DisplacementOverflowError: Если расстояние не представимо конечным float

    Examples:
        >>> compute_distance(tokenize("3F4R"))
        5.0
        >>> compute_distance([])
        0.0
    """
    displacement = compute_displacement(tokens)
    distance = checked_distance(displacement)
    logger.debug(
        "Displacement h=%s v=%s → distance %s",
        displacement.horizontal,
        displacement.vertical,
        distance,
    )
    return distance


def calculate_path_distance(raw: str | None) -> float:
    """
    Разбор маршрута и расчёт расстояния.

    Args:
        raw: Строка маршрута, например "1B2F3L4R"

    Returns:
        Евклидово расстояние

    Raises:
        PathInputError: Если маршрут отклонён
    """
    return compute_distance(tokenize(raw))
