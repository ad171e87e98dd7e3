# roster_report/pipeline.py
"""Главный сценарий обработки: чтение -> разбор -> подсчет -> отчет -> запись."""
import logging
import os
from typing import Optional

from .errors import AllMarksInvalidError, ReportError
from .io_utils import output_path_for, read_sheet, save_workbook
from .models import PipelineResult
from .parser import parse_students
from .processing import aggregate
from .report import build_report

log = logging.getLogger(__name__)


def process_file(filepath: str, logger: Optional[logging.Logger] = None) -> str:
    """Обрабатывает входной xlsx-файл и сохраняет отчет рядом с ним.

    Возвращает путь к отчету. Любая ошибка формата прерывает обработку
    до записи файла и выбрасывается как ReportError.
    """
    logger = logger or log
    logger.info(f"Processing file: {os.path.basename(filepath)}")

    rows = read_sheet(filepath)
    students = parse_students(rows)
    result = aggregate(students)
    logger.info(f"Parsed {len(students)} students, distribution: {result.distribution}")

    if not result.has_valid_marks:
        raise AllMarksInvalidError()

    workbook = build_report(students, result)
    output_path = output_path_for(filepath)
    save_workbook(workbook, output_path)

    logger.info(f"Report written: {output_path}")
    return output_path


def run_pipeline(filepath: str, logger: Optional[logging.Logger] = None) -> PipelineResult:
    """Запускает обработку и переводит ошибки в понятное пользователю сообщение."""
    logger = logger or log
    try:
        output_path = process_file(filepath, logger)
    except ReportError as e:
        logger.error(f"Ошибка обработки файла Excel [{e.kind}]: {e}")
        return PipelineResult(error=e)
    return PipelineResult(output_path=output_path)
