"""CLI entry point for enki."""
from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from enki import __version__
from enki.config import EXPORTERS, STYLES, EnkiConfig, load_config
from enki.core.case import TestCase
from enki.reporting import (
    ConsoleResultExporter,
    ResultExporter,
    TextFileResultExporter,
    XMLFileResultExporter,
)
from enki.utils.importing import resolve_target


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"enki {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the enki version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for enki."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.argument("target")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file.",
)
@click.option("--exporter", type=click.Choice(EXPORTERS), help="Result exporter (console by default).")
@click.option("--output", type=str, help="Output file for the text and xml exporters.")
@click.option("--durations/--no-durations", default=None, help="Include test durations in the report.")
@click.option("--style", type=click.Choice(STYLES), help="Status token style.")
@click.pass_obj
def run(
    state: CliState,
    target: str,
    config_path: Optional[str],
    exporter: Optional[str],
    output: Optional[str],
    durations: Optional[bool],
    style: Optional[str],
) -> None:
    """Run the TestCase subclass named by TARGET (module:Class or file.py:Class)."""

    try:
        config = load_config(config_path).with_overrides(
            exporter=exporter,
            output=output,
            export_duration=durations,
            style=style,
        )
        testcase = _instantiate(target)
        failed = testcase.run()
        with _build_exporter(config) as result_exporter:
            result_exporter.export_results(testcase)
    except Exception as exc:  # pragma: no cover - CLI error translation
        if state.verbose:
            logging.getLogger(__name__).exception("run failed")
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(1 if failed else 0)


def _instantiate(target: str) -> TestCase:
    obj = resolve_target(target)
    if isinstance(obj, type) and issubclass(obj, TestCase):
        return obj()
    if isinstance(obj, TestCase):
        return obj
    raise TypeError(f"'{target}' is not a TestCase subclass")


def _build_exporter(config: EnkiConfig) -> ResultExporter:
    if config.exporter == "console":
        if config.output:
            click.echo(f"Warning: --output {config.output} is ignored by the console exporter", err=True)
        return ConsoleResultExporter(config.export_duration, style=config.style)
    if not config.output:
        raise ValueError(f"The {config.exporter} exporter requires --output")
    if config.exporter == "text":
        return TextFileResultExporter(config.output, config.export_duration, style=config.style)
    return XMLFileResultExporter(config.output, config.export_duration)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="enki", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
