# roster_report/models.py
"""Модуль, определяющий основные модели данных: ячейку, запись студента, итоги."""
import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional


class CellKind(Enum):
    """Тип значения, прочитанного из ячейки таблицы."""
    NUMERIC = "numeric"
    TEXT = "text"
    EMPTY = "empty"
    OTHER = "other"


class Cell(NamedTuple):
    kind: CellKind
    value: Any = None


class SheetRow(NamedTuple):
    """Строка листа с ее номером в таблице (с единицы)."""
    number: int
    cells: List[Cell]


def classify_cell(value: Any, data_type: str = "n") -> Cell:
    """Определяет тип значения ячейки до его интерпретации.

    data_type - тип ячейки openpyxl; ошибки формул ("e") не считаются ни текстом, ни числом.
    """
    if data_type == "e":
        return Cell(CellKind.OTHER, value)
    if value is None:
        return Cell(CellKind.EMPTY)
    if isinstance(value, bool):
        return Cell(CellKind.OTHER, value)
    if isinstance(value, numbers.Real):
        if math.isnan(value):
            return Cell(CellKind.EMPTY)
        return Cell(CellKind.NUMERIC, value)
    if isinstance(value, str):
        return Cell(CellKind.TEXT, value)
    return Cell(CellKind.OTHER, value)


@dataclass(frozen=True)
class StudentRecord:
    """Запись о студенте: части имени и оценка."""
    first_name: str
    middle_name: str
    last_name: str
    mark: float

    def __post_init__(self):
        if not self.first_name or not self.last_name:
            raise ValueError("Имя и фамилия студента не могут быть пустыми.")
        if self.mark < 0:
            raise ValueError(f"Оценка {self.mark} не может быть отрицательной.")

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.middle_name, self.last_name) if p)


class AggregateResult(NamedTuple):
    """Распределение оценок и средний балл по допустимым оценкам."""
    distribution: Dict[str, int]
    average_mark: Optional[float]
    valid_mark_count: int

    @property
    def total_students(self) -> int:
        return sum(self.distribution.values())

    @property
    def has_valid_marks(self) -> bool:
        return self.valid_mark_count > 0


class PipelineResult(NamedTuple):
    """Итог обработки одного файла: путь к отчету или ошибка."""
    output_path: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""
