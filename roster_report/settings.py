# roster_report/settings.py
"""Константы отчёта: подписи, размеры, расположение диаграммы."""

OUTPUT_SUFFIX = "_info"
OUTPUT_EXTENSION = ".xlsx"

SUMMARY_SHEET_TITLE = "Сводка"

# Порядок подписей совпадает с порядком колонок в строках данных
HEADERS = ("Имя", "Фамилия", "Отчество", "Оценка")
COLUMN_WIDTH = 15

NOT_ADMITTED = "не допущен"
VALID_MARKS = (3, 4, 5)

AVERAGE_LABEL = "Средняя оценка"
AVERAGE_NUMBER_FORMAT = "0.00"

HEADER_FILL_COLOR = "C0C0C0"

CHART_TITLE = "График оценок"
CHART_X_TITLE = "Оценки"
CHART_Y_TITLE = "Студенты"
CHART_SERIES_TITLE = "Студенты"
CHART_LEGEND_POSITION = "tr"
CHART_ANCHOR = "G2"
CHART_WIDTH = 18
CHART_HEIGHT = 7.5

# Вспомогательная таблица распределения, на которую ссылается диаграмма
DISTRIBUTION_COLUMN = 18
