"""Rendering of decoded payloads and stderr diagnostics.

Payloads (pydantic DTOs, lists of them, or scalars such as a mastery
score) go to stdout in one of three shapes:

* ``json`` -- the ``model_dump(mode="json")`` form, indented.
* ``plain`` -- tab-separated: ``field<TAB>value`` lines for one record,
  a header row plus one row per record for a list of records.
* ``rich`` -- a :class:`rich.table.Table` for lists of records,
  highlighted JSON for anything else.

``auto`` picks ``rich`` on an interactive, coloured terminal and
``plain`` otherwise. ``NO_COLOR`` and ``TERM=dumb`` disable colour.

Diagnostics go to stderr. The library only ever calls :func:`debug`
(cache hits, misses and request status lines), which prints nothing
unless a verbose :class:`OutputManager` has been installed with
:func:`set_output`; the CLI does that for ``--verbose``.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text


class OutputFormat(str, Enum):
    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


def to_data(value: Any) -> Any:
    """Turn a DTO, a list of DTOs or a plain value into JSON-ready data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [to_data(item) for item in value]
    if isinstance(value, dict):
        return {key: to_data(item) for key, item in value.items()}
    return value


def _is_record_list(data: Any) -> bool:
    return isinstance(data, list) and bool(data) and all(isinstance(i, dict) for i in data)


def _cell(value: Any) -> str:
    # Nested structures (image, stats, spells) stay on one line.
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


class OutputManager:
    """Writes payloads to stdout and diagnostics to stderr.

    Args:
        format: Payload format; ``AUTO`` is resolved once, here.
        no_color: Disable colour and markup.
        quiet: Drop hints printed by :meth:`suggest`.
        verbose: Print :meth:`debug` traces.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            format = OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.PLAIN
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        return self._format

    # --- stdout ---

    def format_response(self, value: Any) -> None:
        """Render *value* (a DTO, list of DTOs, dict or scalar) to stdout."""
        data = to_data(value)
        if self._format == OutputFormat.JSON:
            self._write(json.dumps(data, indent=2, ensure_ascii=False))
        elif self._format == OutputFormat.PLAIN:
            self._print_plain(data)
        else:
            self._print_rich(data)

    def _print_plain(self, data: Any) -> None:
        if _is_record_list(data):
            columns = list(data[0])
            self._write("\t".join(columns))
            for record in data:
                self._write("\t".join(_cell(record.get(c, "")) for c in columns))
        elif isinstance(data, dict):
            for field, value in data.items():
                self._write(f"{field}\t{_cell(value)}")
        elif isinstance(data, list):
            for item in data:
                self._write(_cell(item))
        else:
            self._write(str(data))

    def _print_rich(self, data: Any) -> None:
        if _is_record_list(data):
            table = Table(show_header=True, header_style="bold cyan")
            columns = list(data[0])
            for column in columns:
                table.add_column(column)
            for record in data:
                table.add_row(*(Text(_cell(record.get(c, ""))) for c in columns))
            self._stdout.print(table)
        elif isinstance(data, (dict, list)):
            text = json.dumps(data, indent=2, ensure_ascii=False)
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))
        else:
            self._stdout.print(str(data))

    def _write(self, text: str) -> None:
        print(text, file=sys.stdout, flush=True)

    # --- stderr ---

    def error(self, message: str) -> None:
        """Print an error. Never suppressed."""
        if self._no_color:
            print(f"Error: {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {message}", highlight=False)

    def suggest(self, message: str) -> None:
        """Print a next-step hint, unless quiet."""
        if self._quiet:
            return
        if self._no_color:
            print(f"→ {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[dim]→ {message}[/dim]", highlight=False)

    def debug(self, message: str) -> None:
        """Print a ``[debug]`` trace in verbose mode only."""
        if not self._verbose:
            return
        if self._no_color:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[dim]\\[debug] {message}[/dim]", highlight=False)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """Return True when NO_COLOR is set (any value) or TERM=dumb."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# --- Global instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    global _output
    _output = None


def format_response(value: Any) -> None:
    get_output().format_response(value)


def error(message: str) -> None:
    get_output().error(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def debug(message: str) -> None:
    get_output().debug(message)
