"""CLI entrypoint for valrules."""

import logging
import sys
from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="valrules")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """valrules - validate records against declarative rule schemas."""
    ctx.ensure_object(dict)
    if verbose:
        from rich.logging import RichHandler

        package_logger = logging.getLogger("valrules")
        package_logger.setLevel(logging.DEBUG)
        if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
            handler = RichHandler(show_path=False)
            handler.setFormatter(logging.Formatter("%(message)s"))
            package_logger.addHandler(handler)


@cli.command()
@click.argument("schema", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("data", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)
@click.option(
    "--first",
    is_flag=True,
    help="Report only the first message per field",
)
def check(schema: Path, data: Path, output_json: bool, first: bool) -> None:
    """Validate DATA (JSON or YAML) against a SCHEMA file (TOML).

    DATA may hold a single record or a list of records. Exits with 1 when
    any record fails.

    Examples:

        valrules check schemas/chores.toml chores.json

        valrules check schemas/chores.toml chores.yaml --first --json
    """
    from .commands.check import run_check
    from .schema import SchemaError

    try:
        exit_code = run_check(schema, data, output_json=output_json, first=first)
    except SchemaError as exc:
        raise click.BadParameter(str(exc), param_hint="SCHEMA") from exc
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="DATA") from exc
    sys.exit(exit_code)


@cli.command("rules")
def list_rules() -> None:
    """List the rules available to schema files."""
    from .commands.rules_cmd import run_list_rules

    sys.exit(run_list_rules())


@cli.command()
@click.argument("rule_name")
def explain(rule_name: str) -> None:
    """Explain a rule (e.g. valrules explain dateBeforeOrEqual)."""
    from .commands.rules_cmd import run_explain

    sys.exit(run_explain(rule_name))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
