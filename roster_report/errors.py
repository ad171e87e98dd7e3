# roster_report/errors.py
"""Модуль для определения пользовательских исключений приложения."""
from typing import Optional


class ReportError(Exception):
    """Базовый класс для всех ошибок обработки файла."""
    kind = "ReportError"
    message = "Неверный формат файла"

    def __init__(self, row: Optional[int] = None):
        self.row = row
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.row is not None:
            return f"{self.message} (строка {self.row})"
        return self.message


class MalformedHeaderError(ReportError):
    """Таблица короче двух строк или в заголовке меньше двух ячеек."""
    kind = "MalformedHeader"
    message = "Неверный формат файла: Таблица должна содержать заголовок из двух столбцов и хотя бы одну строку"


class MissingDataError(ReportError):
    """В строке нет ячейки с именем или с оценкой."""
    kind = "MissingData"
    message = "Неверный формат файла: Отсутствует информация"


class MarkNotNumericError(ReportError):
    """Оценка записана не числом."""
    kind = "MarkNotNumeric"
    message = "Неверный формат файла: Оценка должна быть числом"


class EmptyNameError(ReportError):
    kind = "EmptyName"
    message = "Неверный формат файла: Пустое имя в ряду"


class NegativeMarkError(ReportError):
    kind = "NegativeMark"
    message = "Неверный формат файла: Оценка не может быть негативной"


class NameTooShortError(ReportError):
    """В имени меньше двух слов."""
    kind = "NameTooShort"
    message = "Неверный формат файла: В имени должно содержаться хотя бы имя и фамилия"


class AllMarksInvalidError(ReportError):
    """Ни одной оценки 3, 4 или 5: средний балл посчитать нельзя."""
    kind = "AllMarksInvalid"
    message = "Неверный формат файла: Нет ни одной допустимой оценки для расчета среднего"


class IOFailureError(ReportError):
    """Исключение, связанное с ошибками файловых операций."""
    kind = "IOFailure"
    message = "Ошибка работы с файлом: необходим действительный xlsx, доступный для чтения, и разрешение на запись отчета"

    def __init__(self, path: str):
        self.path = path
        super().__init__()
