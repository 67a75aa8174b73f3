"""
Contract Validation Module

Машиночитаемый отчёт о маршруте и его JSON Schema валидация.
"""

from .report import build_path_report
from .validators import (
    ContractValidator,
    PathReportValidator,
    SchemaLoader,
    validate_path_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PathReportValidator",
    # Functions
    "build_path_report",
    "validate_path_report",
]
