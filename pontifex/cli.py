"""
Pontifex CLI
=============

Click-based command-line interface for the Pontifex cipher.

Usage::

    pontifex -e "HELLO WORLD" --deck deck.json
    pontifex -d "CIPHERTEXT" --deck deck.json
    pontifex --generate new_deck.json

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from shared.config import PontifexConfig
from shared.console import PontifexConsole

from pontifex import __version__
from pontifex.core.engine import PontifexEngine
from pontifex.core.errors import (
    DeckFileError,
    DeckIntegrityError,
    MalformedInputError,
)
from pontifex.core.models import CipherMode, CipherResult
from pontifex.output.console import PontifexConsoleOutput
from pontifex.output.report import PontifexReportGenerator


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-e", "--encrypt", "plaintext",
    default=None,
    metavar="PLAINTEXT",
    help="Encrypt a message.",
)
@click.option(
    "-d", "--decrypt", "ciphertext",
    default=None,
    metavar="CIPHERTEXT",
    help="Decrypt a message.",
)
@click.option(
    "--deck", "deck_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON file containing the deck order.",
)
@click.option(
    "--generate", "generate_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a freshly shuffled deck to this JSON file and exit.",
)
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a JSON report to this file.",
)
@click.option(
    "--show-deck",
    is_flag=True,
    default=False,
    help="Display the starting deck before processing.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(__version__, prog_name="pontifex")
@click.pass_context
def cli(
    ctx: click.Context,
    plaintext: Optional[str],
    ciphertext: Optional[str],
    deck_path: Optional[str],
    generate_path: Optional[str],
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    show_deck: bool,
    quiet: bool,
) -> None:
    """Pontifex (Solitaire) cipher.

    Encrypt or decrypt letters with a 54-card deck as the key. The same
    deck file must be used for both directions.

    \b
    Examples:
      pontifex -e "HELLO WORLD" --deck deck.json
      pontifex -d "CIPHERTEXT" --deck deck.json
      pontifex --generate new_deck.json
    """
    try:
        pontifex_config = PontifexConfig.load(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc
    console = PontifexConsole(quiet=quiet)
    engine = PontifexEngine(pontifex_config)

    if generate_path:
        try:
            engine.generate_deck(generate_path)
        except DeckFileError as exc:
            console.error(f"Failed to generate deck: {exc}")
            ctx.exit(1)
        click.echo(f"Generated random deck saved to {generate_path}")
        return

    # Empty messages count as absent
    plaintext = plaintext or None
    ciphertext = ciphertext or None
    if plaintext is not None and ciphertext is not None:
        raise click.UsageError("Use only one of -e/--encrypt and -d/--decrypt.")

    deck_path = deck_path or pontifex_config.cipher.default_deck
    if (plaintext is None and ciphertext is None) or not deck_path:
        click.echo(ctx.get_help())
        return

    if plaintext is not None:
        mode, text = CipherMode.ENCRYPT, plaintext
    else:
        mode, text = CipherMode.DECRYPT, ciphertext

    if output == "console":
        console.banner(version=__version__)

    try:
        if show_deck:
            PontifexConsoleOutput(console).display_deck(engine.load_deck(deck_path).cards)
        result = engine.run(text, mode, deck_path)
    except (DeckFileError, DeckIntegrityError) as exc:
        console.error(f"Failed to load deck: {exc}")
        ctx.exit(1)
    except MalformedInputError as exc:
        console.error(f"Invalid message: {exc}")
        ctx.exit(1)

    _handle_output(ctx, result, console, pontifex_config, output, output_file)


def _handle_output(
    ctx: click.Context,
    result: CipherResult,
    console: PontifexConsole,
    config: PontifexConfig,
    output: str,
    output_file: Optional[str],
) -> None:
    """Print the result in the selected format and write the report file."""
    reporter = PontifexReportGenerator()

    if output == "json":
        if not output_file:
            click.echo(json.dumps(reporter.build(result), indent=2, ensure_ascii=False))
    else:
        label = "Ciphertext" if result.mode is CipherMode.ENCRYPT else "Plaintext"
        click.echo(f"{label}: {result.output_text}")
        PontifexConsoleOutput(console).display_result(
            result, group_size=config.cipher.group_size
        )

    if output_file:
        try:
            path = reporter.generate_json(result, Path(output_file))
        except OSError as exc:
            console.error(f"Failed to write report {output_file}: {exc.strerror or exc}")
            ctx.exit(1)
        console.success(f"JSON report saved to: {path}")


def main() -> None:
    """Main entry point for the Pontifex CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
