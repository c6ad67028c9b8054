"""Status lines for the `pvz` CLI.

Every helper writes to stderr, leaving stdout to the JSON results. Glyphs fall
back to ASCII when stderr cannot encode emoji.
"""

import click

GLYPHS = {
    "warn": ("⚠️", "[!]"),
    "success": ("✅", "[OK]"),
    "error": ("❌", "[X]"),
}


def _can_encode(text: str) -> bool:
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        text.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the emoji for `kind` if stderr can show it, else its ASCII form."""
    emoji, fallback = GLYPHS[kind]
    return emoji if _can_encode(emoji) else fallback


def warn(msg: str) -> None:
    """Print a bold yellow warning line to stderr."""
    click.secho(f"{glyph('warn')}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Print a bold green success line to stderr."""
    click.secho(f"{glyph('success')}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Print a bold red error line to stderr."""
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
