# roster_report/io_utils.py
"""Модуль для операций ввода/вывода: чтение исходной таблицы и сохранение отчета."""
import os
import tempfile
import zipfile
from typing import List

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .errors import IOFailureError
from .models import CellKind, SheetRow, classify_cell
from .settings import OUTPUT_EXTENSION, OUTPUT_SUFFIX


def read_sheet(filepath: str) -> List[SheetRow]:
    """Читает первый лист xlsx-файла и возвращает пронумерованные строки типизированных ячеек.

    Первая строка листа - заголовок. Полностью пустые строки после нее
    пропускаются, как отсутствующие в файле.
    """
    try:
        wb = load_workbook(filepath, read_only=True, data_only=True)
    except (OSError, ValueError, KeyError, zipfile.BadZipFile, InvalidFileException) as e:
        raise IOFailureError(str(filepath)) from e

    rows = []
    try:
        ws = wb.worksheets[0]
        for number, cells in enumerate(ws.iter_rows(), start=1):
            typed = [classify_cell(c.value, c.data_type) for c in cells]
            if number > 1 and all(c.kind is CellKind.EMPTY for c in typed):
                continue
            rows.append(SheetRow(number, typed))
    except (OSError, ValueError, KeyError, IndexError, zipfile.BadZipFile) as e:
        raise IOFailureError(str(filepath)) from e
    finally:
        wb.close()
    return rows


def output_path_for(filepath: str) -> str:
    """Формирует путь отчета: имя исходного файла без расширения + '_info.xlsx'."""
    root, _ = os.path.splitext(os.path.abspath(filepath))
    return root + OUTPUT_SUFFIX + OUTPUT_EXTENSION


def save_workbook(workbook: Workbook, filepath: str):
    """Сохраняет книгу через временный файл в той же папке.

    Отчет появляется на месте только целиком; при ошибке прежний файл не меняется.
    """
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(suffix=OUTPUT_EXTENSION,
                                        dir=os.path.dirname(os.path.abspath(filepath)))
        os.close(fd)
        workbook.save(tmp_path)
        os.replace(tmp_path, filepath)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise IOFailureError(str(filepath)) from e
    finally:
        workbook.close()
