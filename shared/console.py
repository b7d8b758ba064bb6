"""
Pontifex Console Interface
===========================

Rich-powered console abstraction providing one presentation layer for
every Pontifex command.

The class wraps :class:`rich.console.Console` and adds convenience
methods for the banner, section headers and success or error lines, all
with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import TextIO

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

_PONTIFEX_THEME = Theme(
    {
        "pontifex.section": "bold bright_magenta",
        "pontifex.success": "bold green",
        "pontifex.error": "bold red",
        "pontifex.dim": "dim white",
        "pontifex.highlight": "bold bright_white",
        "pontifex.joker": "bold bright_magenta",
        "pontifex.red_suit": "bold red",
        "pontifex.black_suit": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___  ___  _  _ _____ ___ ___ _____  __
 | _ \/ _ \| \| |_   _|_ _| __| __\ \/ /
 |  _/ (_) | .` | | |  | || _|| _| >  <
 |_|  \___/|_|\_| |_| |___|_| |___/_/\_\
[/bright_cyan]"""

_TAGLINE = "Solitaire deck cipher"


class PontifexConsole:
    """Unified console interface for the Pontifex CLI.

    Usage::

        con = PontifexConsole()
        con.banner()
        con.section("Result")
        con.success("Deck written")

    Errors go to stderr and are shown even when *quiet* is set.
    """

    def __init__(self, *, quiet: bool = False, file: TextIO | None = None) -> None:
        self._console = Console(
            theme=_PONTIFEX_THEME,
            quiet=quiet,
            highlight=False,
            file=file,
        )
        self._stderr = Console(theme=_PONTIFEX_THEME, stderr=True, highlight=False)

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the ASCII-art banner with the version beneath it."""
        subtitle = (
            f"[pontifex.highlight]{_TAGLINE}[/pontifex.highlight]\n"
            f"[pontifex.dim]Version: {version}[/pontifex.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        self._console.rule(
            f"  {title}  ",
            style="pontifex.section",
            characters="─",
        )

    # ------------------------------------------------------------------ #
    #  Status lines
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[pontifex.success][✔] SUCCESS:[/pontifex.success] {escape(message)}",
            soft_wrap=True,
        )

    def error(self, message: str) -> None:
        self._stderr.print(
            f"[pontifex.error][✘] ERROR:[/pontifex.error] {escape(message)}",
            soft_wrap=True,
        )
