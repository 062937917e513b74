"""Templates for the files that make up a generated Cargo module.

Each ``render_*`` function is pure: it takes a validated
:class:`~hoex.schema.ModuleRequest` and returns the finished text without
touching the filesystem.
"""

from __future__ import annotations

from typing import Any, Callable

from .schema import ModuleRequest
from .template import TemplateRenderer

__all__ = [
    "INTEGRATION_TEST_PATH",
    "MANIFEST_PATH",
    "README_PATH",
    "SOURCE_PATH",
    "module_context",
    "render_integration_test",
    "render_manifest",
    "render_module_files",
    "render_readme",
    "render_source",
]

MANIFEST_PATH = "Cargo.toml"
SOURCE_PATH = "src/main.rs"
README_PATH = "README.md"
INTEGRATION_TEST_PATH = "tests/integration.rs"


MANIFEST_TEMPLATE = """# {{ kind }}: {{ name }}
[package]
name = "{{ package_name }}"
version = "0.1.0"
edition = "2021"
authors.workspace = true
license.workspace = true
repository.workspace = true
description = "{{ description|toml }}"

[dependencies]
# Add dependencies as needed
# Common ones available in workspace:
# serde = { workspace = true }
# tokio = { workspace = true }
# clap = { workspace = true }
# anyhow = { workspace = true }

[[bin]]
name = "{{ package_name }}"
path = "src/main.rs"
"""

SOURCE_TEMPLATE = """// {{ kind }}: {{ name }}
// {{ description }}
//
// To run this program:
// 1. Navigate to this directory: cd {{ directory }}/{{ name }}
// 2. Run the program: cargo run
//
// Key concepts demonstrated:
// - [Add concepts here]

fn main() {
    println!("Hello from {{ name|rust }}!");

    todo!("Implement the main functionality");
}

#[cfg(test)]
mod tests {
    #[test]
    fn test_basic_functionality() {
        assert_eq!(2 + 2, 4);
    }
}
"""

README_TEMPLATE = """# {{ name }}

{{ description }}

## Overview

This {{ kind }} demonstrates:
- [Concept 1]
- [Concept 2]
- [Concept 3]

## Learning Objectives

After completing this {{ kind }}, you should understand:
- [ ] [Objective 1]
- [ ] [Objective 2]
- [ ] [Objective 3]

## Running the Code

```bash
# Run the program
cargo run

# Run tests
cargo test

# Check code with clippy
cargo clippy

# Format code
cargo fmt
```

## Key Concepts

### [Concept 1]
[Explanation of the first key concept]

### [Concept 2]
[Explanation of the second key concept]

## Exercises

1. [Exercise 1 description]
2. [Exercise 2 description]
3. [Exercise 3 description]

## Further Reading

- [The Rust Book - Relevant Chapter](https://doc.rust-lang.org/book/)
- [Rust by Example - Relevant Section](https://doc.rust-lang.org/rust-by-example/)

## Related Examples

- [Link to related example 1]
- [Link to related example 2]
"""

INTEGRATION_TEST_TEMPLATE = """// Integration tests for {{ name }}
// {{ description }}

#[test]
fn test_integration() {
    assert_eq!(2 + 2, 4);
}
"""


_RENDERER = TemplateRenderer()


def module_context(request: ModuleRequest) -> dict[str, Any]:
    """Return the placeholder values shared by every module template."""

    return {
        "name": request.raw_name,
        "kind": request.kind.value,
        "directory": request.kind.directory,
        "package_name": request.package_name,
        "description": request.description,
    }


def _render(template: str, request: ModuleRequest) -> str:
    return _RENDERER.render_string(template, module_context(request))


def render_manifest(request: ModuleRequest) -> str:
    """Render ``Cargo.toml`` with a package and binary named after the sanitized identifier."""

    return _render(MANIFEST_TEMPLATE, request)


def render_source(request: ModuleRequest) -> str:
    """Render ``src/main.rs``: a greeting, a ``todo!`` placeholder and one unit test."""

    return _render(SOURCE_TEMPLATE, request)


def render_readme(request: ModuleRequest) -> str:
    return _render(README_TEMPLATE, request)


def render_integration_test(request: ModuleRequest) -> str:
    return _render(INTEGRATION_TEST_TEMPLATE, request)


_FILE_RENDERERS: tuple[tuple[str, Callable[[ModuleRequest], str]], ...] = (
    (MANIFEST_PATH, render_manifest),
    (SOURCE_PATH, render_source),
    (README_PATH, render_readme),
    (INTEGRATION_TEST_PATH, render_integration_test),
)


def render_module_files(request: ModuleRequest) -> list[tuple[str, str]]:
    """Return ``(relative_path, text)`` pairs for every file of the module, in write order."""

    return [(relative_path, render(request)) for relative_path, render in _FILE_RENDERERS]
