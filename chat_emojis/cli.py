"""
Console entry-point for chat-emojis.

Run `python -m chat_emojis.cli rewrite --emojis emojis.json "hi :smile:"` to
see how a chat line would be rewritten, or `check emojis.json` to validate
every code in an emoji file up front.
"""

import logging
import sys

import click

from chat_emojis.config import read_emoji_file
from chat_emojis.errors import EmojiFileError, EmojiFormatError
from chat_emojis.formatter import emoji_format
from chat_emojis.registry import EmojiRegistry
from chat_emojis.rewriter import ChatRewriter

logger = logging.getLogger("cli")

# ---------------------------------------------------------------------------
# Helpers --------------------------------------------------------------------
# ---------------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


def _read_emojis(path: str) -> dict[str, str]:
    try:
        return read_emoji_file(path)
    except EmojiFileError as e:
        raise click.ClickException(str(e)) from e


# ---------------------------------------------------------------------------
# Click commands -------------------------------------------------------------
# ---------------------------------------------------------------------------


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:  # noqa: D401  (simple grouping command)
    """Chat-emojis command-line tools."""
    _setup_logging(verbose)


@cli.command("rewrite", help="Replace emoji shortcodes in TEXT (or each line of stdin).")
@click.option(
    "--emojis",
    "emoji_files",
    type=click.Path(exists=True, dir_okay=False),
    multiple=True,
    required=True,
    help="JSON file mapping ':alias:' to 'E<hex>' codes. May be repeated; later files win.",
)
@click.argument("text", nargs=-1)
def rewrite(emoji_files: tuple[str, ...], text: tuple[str, ...]) -> None:
    """Print the rewritten message(s)."""
    registry = EmojiRegistry()
    for path in emoji_files:
        registry.register_bulk(_read_emojis(path))
    logger.debug("Registry holds %d emoji(s)", len(registry))

    rewriter = ChatRewriter(registry)
    if text:
        click.echo(rewriter.rewrite_text(" ".join(text)))
        return
    stdin = click.get_text_stream("stdin")
    for line in iter(stdin.readline, ""):
        click.echo(rewriter.rewrite_text(line.rstrip("\n")))


@cli.command("check", help="Validate every code in an emoji file.")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def check(path: str) -> None:
    """Report entries whose code would not format; exit 1 if any."""
    emojis = _read_emojis(path)
    bad = 0
    for alias, code in sorted(emojis.items()):
        try:
            emoji_format(code)
        except EmojiFormatError as e:
            bad += 1
            click.echo(f"{alias}: {e.kind}: {e}")
    if bad:
        logger.warning("%d of %d emoji(s) invalid in %s", bad, len(emojis), path)
        sys.exit(1)
    click.echo(f"{len(emojis)} emoji(s) OK")


if __name__ == "__main__":
    cli()
