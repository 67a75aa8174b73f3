"""
Path Report — машиночитаемый отчёт о маршруте

Собирает результат разбора и расчёта в dict, соответствующий
контракту path_report.json. Отклонённый маршрут не бросает exception:
причина попадает в поле error.
"""

from typing import Any, Dict

from src.core.math.displacement import checked_distance, compute_displacement
from src.core.parsing.errors import PathInputError
from src.core.parsing.tokenizer import tokenize


def build_path_report(raw: str | None) -> Dict[str, Any]:
    """
    Отчёт о маршруте.

    Args:
        raw: Строка маршрута

    Returns:
        dict с полями input, accepted, tokens, horizontal, vertical,
        distance, error
    """
    try:
        tokens = tokenize(raw)
        displacement = compute_displacement(tokens)
        distance = checked_distance(displacement)
    except PathInputError as e:
        return {
            "input": raw,
            "accepted": False,
            "tokens": [],
            "horizontal": None,
            "vertical": None,
            "distance": None,
            "error": {"kind": e.kind.value, "message": e.user_message},
        }

    return {
        "input": raw,
        "accepted": True,
        "tokens": [token.text for token in tokens],
        "horizontal": displacement.horizontal,
        "vertical": displacement.vertical,
        "distance": distance,
        "error": None,
    }
