from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

import pydantic
import typer

from currencli import __version__
from currencli.application.ports import InputProvider
from currencli.application.use_cases import (
    AcquireCredential,
    ConvertAmount,
    ListFavorites,
    ListRates,
    SaveFavorite,
    ValidateCredential,
)
from currencli.bootstrap import AppContext, init_app
from currencli.domain.errors import CurrencliError
from currencli.infrastructure.config.settings import get_settings
from currencli.infrastructure.logging.config import configure_logging, get_logger

from .formatters import console, print_conversion, print_error, print_favorites, print_rates, print_saved_pair
from .prompts import AMOUNT_PROMPT, BASE_PROMPT, FROM_PROMPT, TO_PROMPT, PromptInput

_app_help = "currencli: Currency Converter CLI Tool."

_app_epilog = "\n".join(
    [
        "\b",
        "Example:",
        "  $ currencli convert",
        "  $ currencli list",
        "  $ currencli save",
        "  $ currencli favorites",
    ]
)

app: typer.Typer = typer.Typer(
    name="currencli",
    help=_app_help,
    epilog=_app_epilog,
    add_completion=False,
    pretty_exceptions_enable=False,
    rich_markup_mode=None,
)

log = get_logger("currencli.cli")


@dataclass(slots=True)
class CliState:
    """Per-invocation state handed to subcommands through ``ctx.obj``."""

    app: AppContext
    inputs: InputProvider


def _build_state() -> CliState:
    return CliState(app=init_app(), inputs=PromptInput())


def _state(ctx: typer.Context) -> CliState:
    return ctx.find_root().obj


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"currencli {__version__}")
        raise typer.Exit(0)


@app.callback(invoke_without_command=True)
def startup(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Acquire and validate the API key, then dispatch one command.

    Sequence: load the stored key (prompting once and saving it when absent),
    probe the provider with it, and only then run the requested command. With
    no command, help is printed and the process exits with status 0.
    """
    state = ctx.obj if isinstance(ctx.obj, CliState) else _build_state()
    ctx.obj = state

    acquired = AcquireCredential(state.app.credentials, state.inputs)()
    if acquired.created:
        console.print("[green]API key saved successfully.[/green]")
    ValidateCredential(state.app.rates)(acquired.credential)
    state.app.credential = acquired.credential
    log.debug("startup_ready", command=ctx.invoked_subcommand)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command("help")
def help_cmd(ctx: typer.Context) -> None:
    """Display help information."""
    typer.echo(ctx.find_root().get_help())


@app.command("convert")
def convert_cmd(ctx: typer.Context) -> None:
    """Convert an amount from one currency to another."""
    state = _state(ctx)
    amount = state.inputs.ask(AMOUNT_PROMPT)
    from_code = state.inputs.ask(FROM_PROMPT)
    to_code = state.inputs.ask(TO_PROMPT)
    result = ConvertAmount(state.app.rates)(state.app.require_credential(), amount, from_code, to_code)
    print_conversion(result.result, result.to_currency)


@app.command("list")
def list_cmd(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output the rate table as a JSON object."),
) -> None:
    """List current exchange rates for a specified currency."""
    state = _state(ctx)
    base_code = state.inputs.ask(BASE_PROMPT)
    base, rates = ListRates(state.app.rates)(state.app.require_credential(), base_code)
    print_rates(base, rates, as_json=json_output)


@app.command("save")
def save_cmd(ctx: typer.Context) -> None:
    """Save favorite currency pairs for quick access."""
    state = _state(ctx)
    from_code = state.inputs.ask(FROM_PROMPT)
    to_code = state.inputs.ask(TO_PROMPT)
    pair = SaveFavorite(state.app.favorites)(from_code, to_code)
    print_saved_pair(pair)


@app.command("favorites")
def favorites_cmd(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output the stored pairs as a JSON array."),
) -> None:
    """Show favorite currency pairs."""
    state = _state(ctx)
    print_favorites(ListFavorites(state.app.favorites)(), as_json=json_output)


def cli(argv: Sequence[str] | None = None, *, state: CliState | None = None) -> int:
    """Run the Typer application with top-level error handling.

    Every CurrencliError is printed as ``Error: <message>`` on stderr and maps
    to exit code 1, as do unexpected exceptions. SystemExit raised by Click
    (help, usage errors, normal completion) passes its code through. Accepts
    optional argv and a prebuilt state for programmatic use.
    """
    try:
        settings = state.app.settings if state is not None else get_settings()
        configure_logging(settings=settings)
        args = list(argv) if argv is not None else sys.argv[1:]
        app(args=args, prog_name="currencli", obj=state)
        return 0
    except CurrencliError as exc:
        log.debug("command_failed", error=type(exc).__name__)
        print_error(str(exc))
        return 1
    except pydantic.ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1
    except SystemExit as se:
        if se.code is None:
            return 0
        return se.code if isinstance(se.code, int) else 1
    except Exception as exc:
        print_error(f"unexpected: {exc}")
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Console-script entry point (``currencli``)."""
    return cli(argv)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(cli())
