# roster_report/__init__.py
"""Анализ успеваемости: сводный отчёт по оценкам студентов из xlsx-файла."""

__version__ = "1.0.0"
