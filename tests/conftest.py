# tests/conftest.py
import pytest
from typing import List
from openpyxl import Workbook
from roster_report.models import StudentRecord


def write_roster(path, rows) -> str:
    """Создает xlsx-файл: первая строка - заголовок, далее строки данных."""
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(list(row))
    wb.save(path)
    return str(path)


@pytest.fixture
def roster_file(tmp_path):
    """Фабрика тестовых xlsx-файлов в tmp_path."""
    def make(rows, name="class.xlsx"):
        return write_roster(tmp_path / name, rows)
    return make


@pytest.fixture
def sample_rows():
    return [
        ("ФИО", "Оценка"),
        ("Иванов Иван Иванович", 5),
        ("Петров Сидор", 4),
        ("Сидорова Анна Петровна", 2),
        ("Кузнецов Олег", 4),
    ]


@pytest.fixture
def sample_students() -> List[StudentRecord]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        StudentRecord("Иванов", "Иван", "Иванович", 5),
        StudentRecord("Петров", "", "Сидор", 4),
        StudentRecord("Сидорова", "Анна", "Петровна", 2),
        StudentRecord("Кузнецов", "", "Олег", 4),
    ]
