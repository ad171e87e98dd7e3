# roster_report/parser.py
"""Модуль разбора исходной таблицы: проверка строк и получение записей студентов.

Разбор идет строго по порядку строк и прерывается на первой ошибке:
частичный результат не возвращается.
"""
import re
from typing import List, Tuple

from .errors import (
    EmptyNameError, MalformedHeaderError, MarkNotNumericError,
    MissingDataError, NameTooShortError, NegativeMarkError,
)
from .models import Cell, CellKind, SheetRow, StudentRecord

NAME_COLUMN = 0
MARK_COLUMN = 1

_WHITESPACE = re.compile(r"\s+")


def check_sheet_shape(rows: List[SheetRow]):
    """Проверяет, что есть заголовок и хотя бы одна строка данных, а в заголовке два столбца."""
    if len(rows) < 2:
        raise MalformedHeaderError()
    header = rows[0]
    filled = sum(1 for c in header.cells if c.kind is not CellKind.EMPTY)
    if filled < 2:
        raise MalformedHeaderError(header.number)


def _cell_at(row: SheetRow, column: int) -> Cell:
    if column < len(row.cells):
        return row.cells[column]
    return Cell(CellKind.EMPTY)


def split_name(full_name: str) -> Tuple[str, str, str]:
    """Делит ФИО на части: первое слово, второе (если слов больше двух), последнее.

    Слова между вторым и последним отбрасываются.
    """
    parts = _WHITESPACE.split(full_name.strip())
    if len(parts) < 2:
        raise NameTooShortError()
    middle = parts[1] if len(parts) > 2 else ""
    return parts[0], middle, parts[-1]


def parse_row(row: SheetRow) -> StudentRecord:
    """Проверяет одну строку данных и строит из нее запись студента."""
    name_cell = _cell_at(row, NAME_COLUMN)
    mark_cell = _cell_at(row, MARK_COLUMN)

    if name_cell.kind is CellKind.EMPTY or mark_cell.kind is CellKind.EMPTY:
        raise MissingDataError(row.number)

    if mark_cell.kind is not CellKind.NUMERIC:
        raise MarkNotNumericError(row.number)

    if name_cell.kind is not CellKind.TEXT:
        raise EmptyNameError(row.number)
    full_name = name_cell.value.strip()
    if not full_name:
        raise EmptyNameError(row.number)

    mark = mark_cell.value
    if mark < 0:
        raise NegativeMarkError(row.number)

    try:
        first, middle, last = split_name(full_name)
    except NameTooShortError:
        raise NameTooShortError(row.number) from None

    return StudentRecord(first, middle, last, mark)


def parse_students(rows: List[SheetRow]) -> List[StudentRecord]:
    """Проверяет форму листа и разбирает все строки данных по порядку."""
    check_sheet_shape(rows)
    return [parse_row(row) for row in rows[1:]]
