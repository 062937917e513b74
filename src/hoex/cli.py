"""Command line interface for the module creator."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from .adapters import AssumeYesConfirmer, ConsoleConfirmer, SubprocessRunner
from .config import WorkspaceConfig
from .errors import InvalidKindError, MissingArgumentError, ScaffoldError
from .interfaces import Confirmer, Runner
from .scaffold import ModuleScaffolder
from .schema import CheckStatus, GenerationResult, GenerationStatus, ModuleKind, ModuleRequest

HOEX_THEME = Theme(
    {
        "hoex.ok": "bold green",
        "hoex.error": "bold red",
        "hoex.warning": "bold yellow",
        "hoex.info": "bold blue",
        "hoex.step": "yellow",
    }
)

console = Console(theme=HOEX_THEME, highlight=False)
err_console = Console(theme=HOEX_THEME, highlight=False, stderr=True)

KIND_HELP = """Types:
  example    - Create a new example in examples/
  exercise   - Create a new exercise in exercises/
  project    - Create a new project in projects/

Examples:
  hoex generate example 11-collections "Working with Vec and HashMap"
  hoex generate project web-api "Simple REST API with axum"
  hoex generate exercise fizzbuzz "Classic FizzBuzz implementation"

Note: The command must be run from the repository root directory."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hoex", description="Create examples, exercises and projects for the Rust workspace"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="create a new example, exercise or project",
        epilog=KIND_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    generate_parser.add_argument(
        "kind",
        nargs="?",
        metavar="type",
        help="Module type: " + ", ".join(kind.value for kind in ModuleKind),
    )
    generate_parser.add_argument("name", nargs="?", help="Directory name of the new module")
    generate_parser.add_argument(
        "description",
        nargs="?",
        help='One line description (default: "A Rust <type> for learning")',
    )
    generate_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Overwrite an existing module without asking",
    )
    generate_parser.add_argument(
        "--no-check",
        action="store_true",
        help="Skip the cargo check run after generation",
    )
    generate_parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Workspace root to use instead of the current directory",
    )
    generate_parser.set_defaults(usage=generate_parser.format_usage())

    return parser


def _print_step(message: str) -> None:
    console.print(f"[hoex.step]{escape(message)}[/hoex.step]")


def _report(result: GenerationResult) -> None:
    request = result.request
    if result.status is GenerationStatus.CANCELLED:
        console.print("[hoex.info]Operation cancelled[/hoex.info]")
        return

    location = escape(str(request.relative_path))
    if result.check is CheckStatus.PASSED:
        console.print("[hoex.ok]Module compiles successfully[/hoex.ok]")
    elif result.check is CheckStatus.FAILED:
        console.print("[hoex.warning]Module created but has compilation issues[/hoex.warning]")
        console.print(f"You can check errors later with: cd {location} && cargo check")

    console.print(
        f"[hoex.ok]Successfully created {request.kind.value}: {escape(request.raw_name)}[/hoex.ok]"
    )
    console.print()
    console.print("Next steps:")
    console.print(f"1. Navigate to the directory: cd {location}")
    console.print("2. Edit src/main.rs to implement your code")
    console.print("3. Update README.md with specific details")
    console.print("4. Run the code: cargo run")
    console.print("5. Add tests and run: cargo test")


def _handle_generate(
    args: argparse.Namespace,
    *,
    confirmer: Confirmer | None,
    runner: Runner | None,
) -> int:
    try:
        if not args.kind or not args.name:
            raise MissingArgumentError("Missing required arguments")
        request = ModuleRequest.build(args.kind, args.name, args.description)
        config = WorkspaceConfig.discover(args.root)
    except ScaffoldError as exc:
        err_console.print(f"[hoex.error]Error: {escape(str(exc))}[/hoex.error]")
        if isinstance(exc, (MissingArgumentError, InvalidKindError)):
            err_console.print(escape(args.usage.rstrip()))
            err_console.print(escape(KIND_HELP))
        return 1

    if confirmer is None:
        confirmer = AssumeYesConfirmer() if args.yes else ConsoleConfirmer(console)
    scaffolder = ModuleScaffolder(
        config,
        confirmer,
        runner or SubprocessRunner(),
        progress=_print_step,
    )
    result = scaffolder.create(request, run_check=not args.no_check)

    _report(result)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    confirmer: Confirmer | None = None,
    runner: Runner | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "generate":
        return _handle_generate(args, confirmer=confirmer, runner=runner)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
