# roster_report/processing.py
"""Модуль для обработки данных: подписи оценок, распределение и средний балл."""
from typing import Dict, List

from .models import AggregateResult, StudentRecord
from .settings import NOT_ADMITTED, VALID_MARKS


def mark_label(mark: float) -> str:
    """Возвращает '3', '4' или '5' для допустимой оценки, иначе 'не допущен'."""
    if mark == int(mark) and int(mark) in VALID_MARKS:
        return str(int(mark))
    return NOT_ADMITTED


def aggregate(students: List[StudentRecord]) -> AggregateResult:
    """Считает распределение по подписям и средний балл за один проход.

    Оценки вне 3..5 попадают в 'не допущен' и в средний балл не входят.
    Если допустимых оценок нет, средний балл равен None.
    """
    distribution: Dict[str, int] = {}
    total = 0.0
    valid_count = 0

    for s in students:
        label = mark_label(s.mark)
        distribution[label] = distribution.get(label, 0) + 1
        if label != NOT_ADMITTED:
            total += s.mark
            valid_count += 1

    average = total / valid_count if valid_count else None
    return AggregateResult(distribution, average, valid_count)
