"""
Path Tokenizer — разбор и валидация закодированного маршрута

Формат ввода: конкатенация групп {digits}{direction} без разделителей,
direction ∈ {F, f, B, b, L, l, R, r}. Пример: "1B2F3L4R".

Алгоритм: один проход слева направо, буфер цифр, без отката.
- цифра → в буфер
- направление → если буфер пуст: MissingMagnitudeError,
  иначе выпуск Token(buffer, direction) и сброс буфера
- любой другой символ → InvalidCharacterError
- конец ввода → если буфер не пуст: DanglingMagnitudeError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Fail-fast на первом нарушении, частичный результат не возвращается
2. Порядок токенов совпадает с порядком ввода
3. Успешный результат всегда непустой
"""

import logging
from dataclasses import dataclass

from src.core.domain.path import Token
from src.core.parsing.errors import (
    DanglingMagnitudeError,
    EmptyInputError,
    InvalidCharacterError,
    MissingMagnitudeError,
    PathInputError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TokenizerConfig:
    """Конфигурация токенизатора.

    Неизменяемые данные о допустимых символах.
    """

    digits: str = "0123456789"
    directions: str = "FBLR"

    # Набор символов, который показывается пользователю в сообщении об ошибке
    allowed_characters_label: str = "FBRL0123456789"

    @property
    def direction_characters(self) -> frozenset[str]:
        """Символы направлений в обоих регистрах"""
        return frozenset(self.directions.upper() + self.directions.lower())

    @property
    def digit_characters(self) -> frozenset[str]:
        return frozenset(self.digits)


# =============================================================================
# TOKENIZER
# =============================================================================


class PathTokenizer:
    """Токенизатор маршрута.

    Преобразует строку ввода в упорядоченный список Token
    или отклоняет её с конкретной ошибкой PathInputError.
    """

    def __init__(self, config: TokenizerConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or TokenizerConfig()
        self._digits = self.config.digit_characters
        self._directions = self.config.direction_characters

    def tokenize(self, raw: str | None) -> list[Token]:
        """Разбор строки маршрута.

        Args:
            raw: строка ввода (может быть None)

        Returns:
            Непустой список Token в порядке ввода

        Raises:
            EmptyInputError: ввод None, пустой или из одних пробелов
            InvalidCharacterError: символ вне допустимого набора
            MissingMagnitudeError: направление без количества шагов
            DanglingMagnitudeError: цифры в конце без направления
        """
        try:
            tokens = self._scan(raw)
        except PathInputError as e:
            logger.info("Path rejected (%s): %s", e.kind.value, e.user_message)
            raise

        logger.debug("Path %r accepted: %d token(s)", raw, len(tokens))
        return tokens

    def is_valid(self, raw: str | None) -> bool:
        """Проверка маршрута без exception.

        Returns:
            True если маршрут разбирается, False иначе
        """
        try:
            self._scan(raw)
        except PathInputError:
            return False
        return True

    def _scan(self, raw: str | None) -> list[Token]:
        if raw is None or not raw.strip():
            raise EmptyInputError()

        tokens: list[Token] = []
        buffer: list[str] = []

        for position, char in enumerate(raw):
            if char in self._digits:
                buffer.append(char)
            elif char in self._directions:
                if not buffer:
                    # Ведущее направление или два направления подряд
                    raise MissingMagnitudeError(position)
                tokens.append(Token(magnitude="".join(buffer), direction_char=char))
                buffer.clear()
            else:
                raise InvalidCharacterError(
                    char, position, self.config.allowed_characters_label
                )

        # Явная проверка остатка буфера
        if buffer:
            raise DanglingMagnitudeError("".join(buffer))

        return tokens


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def tokenize(raw: str | None, config: TokenizerConfig | None = None) -> list[Token]:
    """
    Разбор строки маршрута с конфигурацией по умолчанию.

    Args:
        raw: строка ввода
        config: конфигурация (опционально)

    Returns:
        Непустой список Token

    Raises:
        PathInputError: при первом нарушении формата
    """
    return PathTokenizer(config).tokenize(raw)


def is_valid_path(raw: str | None) -> bool:
    """Проверка, что строка является корректным маршрутом."""
    return PathTokenizer().is_valid(raw)
