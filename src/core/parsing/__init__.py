"""
Parsing modules

Разбор закодированного маршрута {digits}{direction} и таксономия ошибок ввода.
"""

from src.core.parsing.errors import (
    DanglingMagnitudeError,
    DisplacementOverflowError,
    EmptyInputError,
    InvalidCharacterError,
    MagnitudeParseError,
    MissingMagnitudeError,
    PathErrorKind,
    PathInputError,
)
from src.core.parsing.tokenizer import (
    PathTokenizer,
    TokenizerConfig,
    is_valid_path,
    tokenize,
)

__all__ = [
    # Errors
    "PathErrorKind",
    "PathInputError",
    "EmptyInputError",
    "InvalidCharacterError",
    "MissingMagnitudeError",
    "DanglingMagnitudeError",
    "MagnitudeParseError",
    "DisplacementOverflowError",
    # Tokenizer
    "TokenizerConfig",
    "PathTokenizer",
    "tokenize",
    "is_valid_path",
]
