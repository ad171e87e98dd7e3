# tests/test_models.py
import math
from datetime import datetime

import pytest
from roster_report.models import (
    AggregateResult, CellKind, PipelineResult, StudentRecord, classify_cell,
)


def test_classify_cell_kinds():
    assert classify_cell(4).kind is CellKind.NUMERIC
    assert classify_cell(3.5).kind is CellKind.NUMERIC
    assert classify_cell("пять").kind is CellKind.TEXT
    assert classify_cell(None).kind is CellKind.EMPTY
    assert classify_cell(math.nan).kind is CellKind.EMPTY
    # bool - подкласс int, но числом-оценкой не считается
    assert classify_cell(True).kind is CellKind.OTHER
    assert classify_cell(datetime(2024, 1, 1)).kind is CellKind.OTHER


def test_classify_error_cell_as_other():
    # ошибка формулы хранится строкой, но текстом не считается
    assert classify_cell("#DIV/0!", "e").kind is CellKind.OTHER
    assert classify_cell("#DIV/0!").kind is CellKind.TEXT


def test_student_record_is_immutable():
    s = StudentRecord("Петров", "", "Сидор", 4)
    with pytest.raises(AttributeError):
        s.mark = 5


def test_student_record_invariants():
    with pytest.raises(ValueError):
        StudentRecord("", "", "Сидор", 4)
    with pytest.raises(ValueError):
        StudentRecord("Петров", "", "Сидор", -1)


def test_student_full_name():
    assert StudentRecord("Иванов", "Иван", "Иванович", 5).full_name == "Иванов Иван Иванович"
    assert StudentRecord("Петров", "", "Сидор", 4).full_name == "Петров Сидор"


def test_aggregate_result_properties():
    r = AggregateResult({"5": 1, "4": 2, "не допущен": 1}, 13 / 3, 3)
    assert r.total_students == 4
    assert r.has_valid_marks
    assert not AggregateResult({"не допущен": 2}, None, 0).has_valid_marks


def test_pipeline_result():
    ok = PipelineResult(output_path="/tmp/a_info.xlsx")
    assert ok.ok and ok.message == ""
    failed = PipelineResult(error=ValueError("плохо"))
    assert not failed.ok
    assert failed.message == "плохо"
