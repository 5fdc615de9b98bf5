"""bloglikes CLI entry point.

The ``bloglikes`` group sets up logging for the run and dispatches to the
like query commands defined in :mod:`.likes`:

- ``bloglikes total-likes USERNAME``
- ``bloglikes most-popular USERNAME``

Examples
    $ bloglikes --version
    $ bloglikes -v total-likes user1 --users users.json
    $ bloglikes --no-log-file most-popular user2 --users users.json --json
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_path

from bloglikes import __version__
from bloglikes.config import APP_NAME, ENV_PREFIX
from bloglikes.logging import configure_logging, console_level

from .likes import most_popular, total_likes

logger = logging.getLogger(__name__)


HELP = """Like counts for users and their blogs.

    Reads users from a JSON file and reports either the total number of likes
    a user collected or the user's most popular blog.
    """

DEFAULT_LOG_PATH = user_log_path(APP_NAME, appauthor=False) / "last-run.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(),
        clickx.TimerOption(),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v", "--verbose", count=True, help="Show INFO (-v) or DEBUG (-vv) logs."
)
@click.option(
    "-q", "--quiet", count=True, help="Show only ERROR (-q) or CRITICAL (-qq) logs."
)
@click.option(
    "--debug", is_flag=True, help="Log everything, with source locations and times."
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar=f"{ENV_PREFIX}_LOG_PATH",
    show_default=True,
    help="File receiving the DEBUG log of the last run.",
)
@click.option(
    "--log-file/--no-log-file",
    default=True,
    envvar=f"{ENV_PREFIX}_LOG_FILE",
    help="Write the DEBUG log of this run to --log-path.",
)
@clickx.pass_context
def bloglikes(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    log_file: bool,
) -> None:
    """Like counts for users and their blogs."""
    if log_file:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    configure_logging(
        level=console_level(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if log_file else None,
    )
    logger.debug(
        "bloglikes %s, log file: %s", __version__, log_path if log_file else "off"
    )
    ctx.call_on_close(logging.shutdown)


bloglikes.add_command(total_likes)
bloglikes.add_command(most_popular)
