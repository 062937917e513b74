from __future__ import annotations

import tomllib

import pytest

from hoex.module_files import (
    module_context,
    render_integration_test,
    render_manifest,
    render_module_files,
    render_readme,
    render_source,
)
from hoex.schema import ModuleRequest


@pytest.fixture()
def request_() -> ModuleRequest:
    return ModuleRequest.build("example", "01-helloWorld", "My first program")


def test_module_context(request_: ModuleRequest):
    assert module_context(request_) == {
        "name": "01-helloWorld",
        "kind": "example",
        "directory": "examples",
        "package_name": "helloworld",
        "description": "My first program",
    }


def test_manifest_declares_sanitized_package_and_binary(request_: ModuleRequest):
    manifest = tomllib.loads(render_manifest(request_))
    assert manifest["package"]["name"] == "helloworld"
    assert manifest["package"]["version"] == "0.1.0"
    assert manifest["package"]["edition"] == "2021"
    assert manifest["package"]["description"] == "My first program"
    assert manifest["package"]["authors"] == {"workspace": True}
    assert manifest["bin"] == [{"name": "helloworld", "path": "src/main.rs"}]


def test_manifest_escapes_quotes_in_description():
    request = ModuleRequest.build("project", "web-api", 'REST API with "axum"')
    manifest = tomllib.loads(render_manifest(request))
    assert manifest["package"]["description"] == 'REST API with "axum"'


def test_manifest_mentions_raw_name(request_: ModuleRequest):
    assert render_manifest(request_).startswith("# example: 01-helloWorld\n")


def test_source_stub(request_: ModuleRequest):
    source = render_source(request_)
    assert 'println!("Hello from 01-helloWorld!");' in source
    assert 'todo!("Implement the main functionality");' in source
    assert "#[cfg(test)]" in source
    assert "assert_eq!(2 + 2, 4);" in source
    assert "// My first program" in source
    assert "cd examples/01-helloWorld" in source


def test_source_stub_escapes_format_braces():
    request = ModuleRequest.build("exercise", "set{1}", None)
    assert 'println!("Hello from set{{1}}!");' in render_source(request)


def test_readme_outline(request_: ModuleRequest):
    readme = render_readme(request_)
    lines = readme.splitlines()
    assert lines[0] == "# 01-helloWorld"
    assert lines[2] == "My first program"
    for heading in (
        "## Overview",
        "## Learning Objectives",
        "## Running the Code",
        "## Key Concepts",
        "## Exercises",
        "## Further Reading",
    ):
        assert heading in lines
    assert "This example demonstrates:" in readme


def test_integration_test_stub(request_: ModuleRequest):
    text = render_integration_test(request_)
    assert text.startswith("// Integration tests for 01-helloWorld\n")
    assert text.count("#[test]") == 1
    assert "assert_eq!(2 + 2, 4);" in text


def test_render_module_files_order(request_: ModuleRequest):
    paths = [path for path, _ in render_module_files(request_)]
    assert paths == ["Cargo.toml", "src/main.rs", "README.md", "tests/integration.rs"]


def test_default_description_is_rendered():
    request = ModuleRequest.build("exercise", "fizzbuzz")
    for _, text in render_module_files(request):
        assert "A Rust exercise for learning" in text
