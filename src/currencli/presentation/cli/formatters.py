from __future__ import annotations

import json
from collections.abc import Mapping

from rich.console import Console
from rich.markup import escape

from currencli.domain.currencies import FavoritePair

__all__ = [
    "console",
    "err_console",
    "human_number",
    "print_conversion",
    "print_rates",
    "print_saved_pair",
    "print_favorites",
    "print_error",
]

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def human_number(value: float | int) -> str:
    """Render a number without a trailing ``.0`` on integral floats (90.0 -> 90)."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)


def print_conversion(result: float, to_code: str) -> None:
    console.print(f"[blue]Converted amount: [green]{human_number(result)}[/green] {escape(to_code)}[/blue]")


def print_rates(base: str, rates: Mapping[str, float], *, as_json: bool = False) -> None:
    if as_json:
        console.print(json.dumps(dict(rates)), markup=False)
        return
    console.print(f"[blue]Exchange rates for {escape(base)}:[/blue]")
    for code, rate in rates.items():
        console.print(f"[yellow]{escape(code)}[/yellow]: [green]{human_number(rate)}[/green]")


def print_saved_pair(pair: FavoritePair) -> None:
    console.print(f"[green]Saved favorite pair: {escape(str(pair))}[/green]")


def print_favorites(pairs: list[FavoritePair], *, as_json: bool = False) -> None:
    if as_json:
        console.print(json.dumps([p.to_dict() for p in pairs]), markup=False)
        return
    if not pairs:
        console.print("[yellow]No favorite pairs saved.[/yellow]")
        return
    console.print("[blue]Favorite currency pairs:[/blue]")
    for p in pairs:
        console.print(f"[yellow]{escape(p.from_currency)}[/yellow] -> [green]{escape(p.to_currency)}[/green]")


def print_error(message: str) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
