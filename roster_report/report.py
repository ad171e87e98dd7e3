# roster_report/report.py
"""Модуль построения отчета: таблица студентов, средний балл и гистограмма оценок."""
from typing import List

from openpyxl import Workbook
from openpyxl.chart import BarChart, Reference
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .models import AggregateResult, StudentRecord
from .processing import mark_label
from .settings import (
    AVERAGE_LABEL, AVERAGE_NUMBER_FORMAT, CHART_ANCHOR, CHART_HEIGHT,
    CHART_LEGEND_POSITION, CHART_TITLE, CHART_WIDTH, CHART_X_TITLE,
    CHART_Y_TITLE, CHART_SERIES_TITLE, COLUMN_WIDTH, DISTRIBUTION_COLUMN,
    HEADER_FILL_COLOR, HEADERS, SUMMARY_SHEET_TITLE,
)

_THIN = Side(style="thin")
THIN_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill("solid", fgColor=HEADER_FILL_COLOR)
DATA_FONT = Font(bold=False)
AVERAGE_FONT = Font(bold=True)


def write_header(ws: Worksheet):
    """Заголовок таблицы: серый фон, рамка, жирный шрифт, фиксированная ширина колонок."""
    for col, title in enumerate(HEADERS, start=1):
        cell = ws.cell(row=1, column=col, value=title)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = THIN_BORDER
        ws.column_dimensions[get_column_letter(col)].width = COLUMN_WIDTH


def write_students(ws: Worksheet, students: List[StudentRecord]) -> int:
    """Пишет по строке на студента в порядке колонок заголовка. Возвращает номер последней строки."""
    row = 1
    for s in students:
        row += 1
        values = (s.first_name, s.last_name, s.middle_name, mark_label(s.mark))
        for col, value in enumerate(values, start=1):
            cell = ws.cell(row=row, column=col, value=value)
            cell.font = DATA_FONT
            cell.border = THIN_BORDER
    return row


def write_average(ws: Worksheet, row: int, average: float):
    label = ws.cell(row=row, column=1, value=AVERAGE_LABEL)
    label.font = AVERAGE_FONT
    value = ws.cell(row=row, column=2, value=average)
    value.font = AVERAGE_FONT
    value.number_format = AVERAGE_NUMBER_FORMAT


def write_distribution(ws: Worksheet, result: AggregateResult) -> int:
    """Таблица 'подпись - число студентов' справа от диаграммы, источник данных для нее."""
    label_col = DISTRIBUTION_COLUMN
    ws.cell(row=1, column=label_col, value=CHART_X_TITLE)
    ws.cell(row=1, column=label_col + 1, value=CHART_SERIES_TITLE)
    row = 1
    for label, count in result.distribution.items():
        row += 1
        ws.cell(row=row, column=label_col, value=label)
        ws.cell(row=row, column=label_col + 1, value=count)
    return row


def add_histogram(ws: Worksheet, last_row: int):
    """Гистограмма распределения оценок по вспомогательной таблице."""
    chart = BarChart()
    chart.type = "col"
    chart.title = CHART_TITLE
    chart.x_axis.title = CHART_X_TITLE
    chart.y_axis.title = CHART_Y_TITLE
    chart.x_axis.delete = False
    chart.y_axis.delete = False
    chart.legend.position = CHART_LEGEND_POSITION
    chart.width = CHART_WIDTH
    chart.height = CHART_HEIGHT

    label_col = DISTRIBUTION_COLUMN
    data = Reference(ws, min_col=label_col + 1, min_row=1, max_row=last_row)
    categories = Reference(ws, min_col=label_col, min_row=2, max_row=last_row)
    chart.add_data(data, titles_from_data=True)
    chart.set_categories(categories)

    ws.add_chart(chart, CHART_ANCHOR)


def build_report(students: List[StudentRecord], result: AggregateResult) -> Workbook:
    """Собирает книгу отчета с единственным листом 'Сводка'."""
    wb = Workbook()
    ws = wb.active
    ws.title = SUMMARY_SHEET_TITLE

    write_header(ws)
    last_row = write_students(ws, students)
    # одна пустая строка между таблицей и средним баллом
    write_average(ws, last_row + 2, result.average_mark)

    distribution_end = write_distribution(ws, result)
    add_histogram(ws, distribution_end)
    return wb
