from __future__ import annotations

import pytest

from hoex.naming import display_kind, sanitize_package_name
from hoex.schema import ModuleKind


@pytest.mark.parametrize(
    "value, expected",
    [
        ("01-helloWorld", "helloworld"),
        ("02-variables", "variables"),
        ("11-collections", "collections"),
        ("web-api", "web_api"),
        ("fizzbuzz", "fizzbuzz"),
        ("My Project", "my_project"),
        ("2024.1 notes", "notes"),
        ("Café!", "caf"),
        ("01-02-nested", "nested"),
    ],
)
def test_sanitize_package_name(value, expected):
    assert sanitize_package_name(value, "example") == expected


@pytest.mark.parametrize(
    "value, kind, expected",
    [
        ("---", "example", "example_example"),
        ("123", "project", "project_example"),
        ("!!!", ModuleKind.EXERCISE, "exercise_example"),
    ],
)
def test_sanitize_package_name_falls_back_to_kind(value, kind, expected):
    assert sanitize_package_name(value, kind) == expected


@pytest.mark.parametrize(
    "value",
    ["01-helloWorld", "web-api", "My Project", "a__b", "x1_2", "---", "1-!2abc"],
)
def test_sanitize_package_name_is_idempotent(value):
    once = sanitize_package_name(value, "example")
    assert sanitize_package_name(once, "example") == once


def test_display_kind():
    assert display_kind("exercise") == "Exercise"
    assert display_kind(ModuleKind.PROJECT) == "Project"
