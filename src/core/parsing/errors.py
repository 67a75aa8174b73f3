"""
Ошибки разбора маршрута

Таксономия ошибок ввода. Все ошибки — подклассы PathInputError(ValueError)
и несут:
- kind: PathErrorKind (машиночитаемая причина)
- user_message: сообщение для показа пользователю

Ошибки не фатальны для процесса: вызывающий слой показывает сообщение
и повторяет запрос.
"""

from enum import Enum


class PathErrorKind(str, Enum):
    """Причина отклонения маршрута"""

    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_CHARACTER = "INVALID_CHARACTER"
    MISSING_MAGNITUDE = "MISSING_MAGNITUDE"
    DANGLING_MAGNITUDE = "DANGLING_MAGNITUDE"
    MAGNITUDE_PARSE_FAILURE = "MAGNITUDE_PARSE_FAILURE"
    DISPLACEMENT_OVERFLOW = "DISPLACEMENT_OVERFLOW"


class PathInputError(ValueError):
    """Базовая ошибка маршрута."""

    kind: PathErrorKind

    def __init__(self, user_message: str):
        self.user_message = user_message
        super().__init__(user_message)


class EmptyInputError(PathInputError):
    """Ввод отсутствует или состоит только из пробелов."""

    kind = PathErrorKind.EMPTY_INPUT

    def __init__(self):
        super().__init__("Input cannot be empty.")


class InvalidCharacterError(PathInputError):
    """Символ вне допустимого набора."""

    kind = PathErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, position: int, allowed: str):
        self.char = char
        self.position = position
        self.allowed = allowed
        super().__init__(
            f"Invalid character '{char}' found in input. "
            f"Only the following characters are allowed: {allowed}"
        )


class MissingMagnitudeError(PathInputError):
    """Направление без предшествующего количества шагов."""

    kind = PathErrorKind.MISSING_MAGNITUDE

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            "Invalid path. Amount of steps must be provided before each direction."
        )


class DanglingMagnitudeError(PathInputError):
    """Цифры в конце ввода без направления."""

    kind = PathErrorKind.DANGLING_MAGNITUDE

    def __init__(self, trailing: str):
        self.trailing = trailing
        super().__init__(f"No direction given on final step(s) of {trailing}")


class MagnitudeParseError(PathInputError):
    """Количество шагов не разбирается как конечное число."""

    kind = PathErrorKind.MAGNITUDE_PARSE_FAILURE

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Step count '{text}' is not a valid number.")


class DisplacementOverflowError(PathInputError):
    """Итоговое смещение или расстояние не представимо конечным float."""

    kind = PathErrorKind.DISPLACEMENT_OVERFLOW

    def __init__(self):
        super().__init__("Path displacement is too large to compute.")
