"""stderr message lines for the bloglikes CLI.

Query results own stdout; anything meant for the human at the terminal goes
through :func:`warn` or :func:`error`. Each line starts with an emoji marker
when stderr can encode it and an ASCII marker otherwise.
"""

import click

WARN_MARKERS = ("⚠️", "[!]")
ERROR_MARKERS = ("❌", "[X]")


def marker(markers: tuple[str, str]) -> str:
    """Pick the emoji of ``markers`` if stderr can encode it, else the ASCII one."""
    emoji, ascii_fallback = markers
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return ascii_fallback
    return emoji


def warn(msg: str) -> None:
    """Print a bold yellow warning line to stderr."""
    click.secho(f"{marker(WARN_MARKERS)}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Print a bold red error line to stderr."""
    click.secho(f"{marker(ERROR_MARKERS)}  {msg}", fg="red", bold=True, err=True)
