"""
Adventure Menu — интерактивный цикл

Цикл меню поверх View:
1. Calculate Path Distance — запрос маршрута и вывод расстояния
2. Instructions — описание формата маршрута
Q. Exit

Ошибки маршрута не фатальны: сообщение показывается, меню повторяется.
Конец ввода (None) на любом запросе завершает цикл как Q.
"""

import logging
from dataclasses import dataclass

from src.core.math.displacement import compute_distance
from src.core.parsing.errors import PathInputError
from src.core.parsing.tokenizer import PathTokenizer
from src.journey.messages import INSTRUCTIONS, distance_message
from src.journey.views import View

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MenuConfig:
    """Конфигурация меню."""

    options: tuple[str, ...] = ("Calculate Path Distance", "Instructions")
    quit_key: str = "Q"

    choice_prompt: str = "Enter your choice: "
    path_prompt: str = "Enter your path (or Q to exit): "


CHOICE_CALCULATE = "1"
CHOICE_INSTRUCTIONS = "2"


# =============================================================================
# MENU
# =============================================================================


class AdventureMenu:
    """Интерактивное меню расчёта расстояния маршрута."""

    def __init__(
        self,
        view: View,
        config: MenuConfig | None = None,
        tokenizer: PathTokenizer | None = None,
    ):
        """
        Args:
            view: ввод/вывод
            config: конфигурация меню (опционально, используется default)
            tokenizer: токенизатор (опционально, используется default)
        """
        self.view = view
        self.config = config or MenuConfig()
        self.tokenizer = tokenizer or PathTokenizer()

    def run(self) -> None:
        """Цикл меню до выбора Q или конца ввода."""
        while True:
            choice = self._read_choice()
            if choice == self.config.quit_key:
                self.view.show("Exiting...")
                return

            self.view.show("")
            if choice == CHOICE_CALCULATE:
                if not self._calculate_path():
                    self.view.show("Exiting...")
                    return
            elif choice == CHOICE_INSTRUCTIONS:
                self.view.show(INSTRUCTIONS)
            else:
                self.view.show("Invalid option. Please try again.")
            self.view.show("")

    def parse_choice(self, raw: str | None) -> str | None:
        """
        Разбор выбора пункта меню.

        Валидный выбор: целое число в диапазоне 1..len(options)
        или quit_key (регистр не важен). Пробелы по краям допускаются.

        Returns:
            Номер пункта строкой, quit_key или None если выбор невалиден
        """
        if raw is None or not raw.strip():
            return None

        text = raw.strip()
        if text.upper() == self.config.quit_key.upper():
            return self.config.quit_key

        try:
            number = int(text)
        except ValueError:
            return None

        if 0 < number <= len(self.config.options):
            return str(number)
        return None

    def _display_options(self) -> None:
        count = len(self.config.options)
        self.view.show(f"Choose an option (1-{count} or {self.config.quit_key}):")
        for i, option in enumerate(self.config.options, start=1):
            self.view.show(f"{i}. {option}")
        self.view.show(f"{self.config.quit_key}. Exit")

    def _read_choice(self) -> str:
        while True:
            self._display_options()
            self.view.show(self.config.choice_prompt, end="")
            raw = self.view.read_line()
            if raw is None:
                logger.debug("End of input at menu prompt")
                return self.config.quit_key

            choice = self.parse_choice(raw)
            if choice is not None:
                logger.debug("Menu choice: %s", choice)
                return choice

            self.view.show("")
            self.view.show("Invalid choice.")

    def _calculate_path(self) -> bool:
        """
        Запрос маршрута и вывод расстояния.

        Returns:
            False если ввод закончился, иначе True
        """
        self.view.show(self.config.path_prompt, end="")
        raw = self.view.read_line()
        if raw is None:
            return False

        if raw.strip().upper() == self.config.quit_key.upper():
            return True

        try:
            distance = compute_distance(self.tokenizer.tokenize(raw))
        except PathInputError as e:
            self.view.show(e.user_message)
            return True

        self.view.show(distance_message(distance))
        return True
