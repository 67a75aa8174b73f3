"""Journey — интерактивный слой: views, меню, CLI.

Тонкая обёртка ввода/вывода над src.core: данные на входе,
расстояние или сообщение об ошибке на выходе.
"""

from .menu import AdventureMenu, MenuConfig
from .messages import INSTRUCTIONS, distance_message, format_distance
from .views import ConsoleView, ScriptedView, View

__all__ = [
    "AdventureMenu",
    "MenuConfig",
    "View",
    "ConsoleView",
    "ScriptedView",
    "INSTRUCTIONS",
    "format_distance",
    "distance_message",
]
