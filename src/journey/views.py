"""
Views — ввод/вывод интерактивного слоя

View — capability interface с двумя операциями:
- read_line() → строка или None (конец ввода)
- show(message, end) → вывод сообщения

Реализации:
- ConsoleView: stdin/stdout
- ScriptedView: заранее заданные строки, вывод записывается (тесты, скрипты)
"""

from collections import deque
from typing import Iterable, Protocol


class View(Protocol):
    """Интерфейс ввода/вывода, заменяемый под окружение."""

    def read_line(self) -> str | None:
        ...

    def show(self, message: str, end: str = "\n") -> None:
        ...


class ConsoleView:
    """Консольный ввод/вывод."""

    def read_line(self) -> str | None:
        """Строка из stdin, None при конце ввода."""
        try:
            return input()
        except EOFError:
            return None

    def show(self, message: str, end: str = "\n") -> None:
        print(message, end=end, flush=True)


class ScriptedView:
    """
    View с заранее заданным вводом.

    Возвращает строки по порядку, затем None. Весь вывод
    накапливается и доступен через transcript / lines.
    """

    def __init__(self, inputs: Iterable[str]):
        self._inputs = deque(inputs)
        self._output: list[str] = []

    def read_line(self) -> str | None:
        if not self._inputs:
            return None
        return self._inputs.popleft()

    def show(self, message: str, end: str = "\n") -> None:
        self._output.append(message + end)

    @property
    def transcript(self) -> str:
        """Весь вывод одной строкой"""
        return "".join(self._output)

    @property
    def lines(self) -> list[str]:
        """Вывод, разбитый по строкам"""
        return self.transcript.splitlines()
