"""Typer application and CLI entry point for narwhalol.

Exposes each League API and DDragon accessor as a sub-command and prints
the decoded payload to stdout::

    narwhalol --region euw summoner "Rekkles"
    narwhalol --json masteries <encrypted-summoner-id>
    narwhalol --language ru_RU champion Xayah

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. Every :class:`~narwhalol.exceptions.NarwhalError`
is reported on stderr and mapped to its ``exit_code``.
"""

from __future__ import annotations

import signal
import sys
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import typer

from narwhalol import __version__
from narwhalol.api import DDragonClient, LeagueClient
from narwhalol.constants import Division, LanguageCode, RankedQueue, RankedTier, Region
from narwhalol.exit_codes import EXIT_GENERIC_FAILURE
from narwhalol.output import format_response


app = typer.Typer(
    name="narwhalol",
    help="Query the League of Legends API and DDragon from the command line.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"narwhalol {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    region: Region = typer.Option(
        Region.NA, "--region", "-r", case_sensitive=False, help="Server region."
    ),
    language: LanguageCode = typer.Option(
        LanguageCode.UNITED_STATES,
        "--language",
        "-l",
        help="DDragon locale, e.g. en_US.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show cache hits and requests on stderr."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~narwhalol.output.OutputManager` and stores
    the region and language in ``ctx.obj`` for the sub-commands.
    """
    from narwhalol.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    ctx.ensure_object(dict)
    ctx.obj["region"] = region
    ctx.obj["language"] = language


# ------------------------------------------------------------------ #
# Helpers
# ------------------------------------------------------------------ #


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn a :class:`NarwhalError` into an stderr message and its exit code."""
    from narwhalol.config import API_KEY_ENV
    from narwhalol.exceptions import MalformedConfigError, NarwhalError
    from narwhalol.output import error, suggest

    try:
        yield
    except NarwhalError as exc:
        error(str(exc))
        if isinstance(exc, MalformedConfigError):
            suggest(f"Set {API_KEY_ENV} to a key from https://developer.riotgames.com")
        raise typer.Exit(code=exc.exit_code) from None


def make_league_client(region: Region) -> LeagueClient:
    """Build the League client used by every League command."""
    return LeagueClient(region)


def make_ddragon_client(language: LanguageCode, version: Optional[str] = None) -> DDragonClient:
    """Build the DDragon client; resolves the latest version when *version* is omitted."""
    return DDragonClient(language, version=version)


# ------------------------------------------------------------------ #
# League API commands
# ------------------------------------------------------------------ #


@app.command("summoner")
def summoner_command(
    ctx: typer.Context,
    name: str = typer.Argument(help="Summoner name."),
) -> None:
    """Look a summoner up by name."""
    with _reported_errors(), make_league_client(ctx.obj["region"]) as lapi:
        format_response(lapi.get_summoner_by_name(name))


@app.command("rotation")
def rotation_command(ctx: typer.Context) -> None:
    """Show the free champion rotation."""
    with _reported_errors(), make_league_client(ctx.obj["region"]) as lapi:
        format_response(lapi.get_champion_info())


@app.command("masteries")
def masteries_command(
    ctx: typer.Context,
    summoner_id: str = typer.Argument(help="Encrypted summoner id."),
) -> None:
    """List every champion mastery of a summoner."""
    with _reported_errors(), make_league_client(ctx.obj["region"]) as lapi:
        format_response(lapi.get_champion_masteries(summoner_id))


@app.command("mastery")
def mastery_command(
    ctx: typer.Context,
    summoner_id: str = typer.Argument(help="Encrypted summoner id."),
    champion_id: int = typer.Argument(help="Numeric champion key, e.g. 64."),
) -> None:
    """Show a summoner's mastery of one champion."""
    with _reported_errors(), make_league_client(ctx.obj["region"]) as lapi:
        format_response(lapi.get_champion_mastery_by_id(summoner_id, champion_id))


@app.command("score")
def score_command(
    ctx: typer.Context,
    summoner_id: str = typer.Argument(help="Encrypted summoner id."),
) -> None:
    """Show a summoner's total mastery score."""
    with _reported_errors(), make_league_client(ctx.obj["region"]) as lapi:
        format_response(lapi.get_total_mastery_score(summoner_id))


@app.command("league")
def league_command(
    ctx: typer.Context,
    summoner_id: str = typer.Argument(help="Encrypted summoner id."),
) -> None:
    """Show a summoner's ranked entries."""
    with _reported_errors(), make_league_client(ctx.obj["region"]) as lapi:
        format_response(lapi.get_league_entries(summoner_id))


@app.command("ladder")
def ladder_command(
    ctx: typer.Context,
    queue: RankedQueue = typer.Argument(help="Ranked queue."),
    tier: RankedTier = typer.Argument(help="Tier.", case_sensitive=False),
    division: Division = typer.Argument(help="Division."),
    page: int = typer.Option(1, "--page", min=1, help="Ladder page, starting at 1."),
) -> None:
    """Show one page of a ranked ladder."""
    with _reported_errors(), make_league_client(ctx.obj["region"]) as lapi:
        format_response(lapi.get_league_entries_page(queue, tier, division, page=page))


# ------------------------------------------------------------------ #
# DDragon commands
# ------------------------------------------------------------------ #


@app.command("champions")
def champions_command(
    ctx: typer.Context,
    game_version: Optional[str] = typer.Option(
        None, "--game-version", help="DDragon version; latest when omitted."
    ),
) -> None:
    """List champion ids and names from DDragon."""
    with _reported_errors(), make_ddragon_client(ctx.obj["language"], game_version) as ddragon:
        champions = ddragon.get_champions()
        format_response({cid: data.name for cid, data in sorted(champions.data.items())})


@app.command("champion")
def champion_command(
    ctx: typer.Context,
    name: str = typer.Argument(help="Champion id, e.g. LeeSin."),
    game_version: Optional[str] = typer.Option(
        None, "--game-version", help="DDragon version; latest when omitted."
    ),
) -> None:
    """Show the full DDragon record of one champion."""
    with _reported_errors(), make_ddragon_client(ctx.obj["language"], game_version) as ddragon:
        format_response(ddragon.get_champion(name))


# ------------------------------------------------------------------ #
# Entry point
# ------------------------------------------------------------------ #


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``narwhalol`` console script.

    Unexpected exceptions are reported on stderr and exit with
    :data:`~narwhalol.exit_codes.EXIT_GENERIC_FAILURE`.
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from narwhalol.output import error

        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
