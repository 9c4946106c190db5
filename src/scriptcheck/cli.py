# src/scriptcheck/cli.py
"""CLI for running property suites.

Usage:
    # Run a suite object (or a zero-argument factory returning one)
    scriptcheck run my_project.tests.suites:build_suite

    # Override configuration
    scriptcheck run my_project.suites:suite --test-count=500 --max-size=40 --seed=1234

    # Layer a YAML file under the flags
    scriptcheck run my_project.suites:suite --config=scriptcheck.yaml

    # Suites are imported relative to the current directory by default
    scriptcheck run suites:build_suite --app-dir=path/to/project
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError

from scriptcheck import __version__
from scriptcheck.core.config import load_config
from scriptcheck.engine.runner import ScriptSuite

app = typer.Typer(
    name="scriptcheck",
    help="scriptcheck: Property-based testing for on-chain validators.",
    no_args_is_help=True,
)


def resolve_suite(target: str, app_dir: Path | None = None) -> ScriptSuite:
    """Import ``module:attribute`` and return the ScriptSuite it names.

    The attribute may be a ScriptSuite or a zero-argument callable
    returning one. ``app_dir`` is put first on ``sys.path`` so suites in
    an uninstalled project can be imported.

    Raises:
        typer.BadParameter: If the target cannot be imported or is not a suite.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise typer.BadParameter(f"Expected 'module:attribute', got '{target}'")

    if app_dir is not None:
        location = str(app_dir.resolve())
        if location not in sys.path:
            sys.path.insert(0, location)

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import module '{module_name}': {exc}") from exc

    try:
        obj = getattr(module, attribute)
    except AttributeError as exc:
        raise typer.BadParameter(f"Module '{module_name}' has no attribute '{attribute}'") from exc

    if callable(obj) and not isinstance(obj, ScriptSuite):
        obj = obj()
    if not isinstance(obj, ScriptSuite):
        raise typer.BadParameter(f"'{target}' is not a ScriptSuite (got {type(obj).__name__})")
    return obj


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """scriptcheck: Property-based testing for on-chain validators."""
    from scriptcheck.core.logging import configure_logging

    configure_logging(json_output=json_logs, level="DEBUG" if verbose else "WARNING")


@app.command()
def run(
    target: Annotated[
        str,
        typer.Argument(help="Suite to run, as 'module:attribute'."),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to YAML configuration file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    max_size: Annotated[
        int | None,
        typer.Option("--max-size", help="Upper bound on generator size.", min=1),
    ] = None,
    test_count: Annotated[
        int | None,
        typer.Option("--test-count", "-n", help="Cases sampled per property.", min=1),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for reproducing a run.", min=0),
    ] = None,
    max_shrink_steps: Annotated[
        int | None,
        typer.Option("--max-shrink-steps", help="Ceiling on shrink steps per counterexample.", min=1),
    ] = None,
    max_shrink_candidates: Annotated[
        int | None,
        typer.Option("--max-shrink-candidates", help="Ceiling on shrink candidates tried per value.", min=1),
    ] = None,
    app_dir: Annotated[
        Path,
        typer.Option("--app-dir", help="Directory to import the suite module from.", file_okay=False),
    ] = Path("."),
) -> None:
    """Run a property suite and print its report."""
    try:
        config = load_config(
            config_file=config_file,
            overrides={
                "max_size": max_size,
                "test_count": test_count,
                "seed": seed,
                "max_shrink_steps": max_shrink_steps,
                "max_shrink_candidates": max_shrink_candidates,
            },
        )
    except (ValidationError, ValueError, yaml.YAMLError) as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    suite = resolve_suite(target, app_dir)
    report = suite.run(config)
    typer.echo(report.render())
    if not report.passed:
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Print the scriptcheck version."""
    typer.echo(f"scriptcheck {__version__}")


def main() -> None:
    """Entry point for scriptcheck CLI."""
    app()


if __name__ == "__main__":
    main()
