"""
Domain models and value objects.

Contains fundamental domain entities: Direction, Token, Displacement.
"""

from src.core.domain.path import Direction, Displacement, Token

__all__ = [
    "Direction",
    "Token",
    "Displacement",
]
