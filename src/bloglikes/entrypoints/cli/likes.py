"""Like query commands for the bloglikes CLI.

- ``bloglikes total-likes USERNAME`` prints the user's total number of likes.
- ``bloglikes most-popular USERNAME`` prints the user's most popular blog.

Users are read from the JSON file given by ``--users`` (or the
``BLOGLIKES_USERS_FILE`` environment variable). Results go to **stdout**;
warnings and errors go to **stderr**.

Failure modes
- No users file configured, unreadable or malformed file → ``ClickException``.
- Unknown user, or no blogs for ``most-popular`` → error line and exit status 1.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import click

from bloglikes import config
from bloglikes.adapters.user_source import UserSourceError, load_users
from bloglikes.domain.errors import DomainError
from bloglikes.domain.likes import compute_total_likes, find_most_popular_blog, get_user
from bloglikes.domain.models import User

from .helpers import error, warn

logger = logging.getLogger(__name__)

MISSING_USERS_FILE_MSG = (
    f"{config.USERS_FILE_ENV} is not set and no --users file was given.\n\n"
    "Pass a JSON users file, e.g.:\n"
    "  bloglikes total-likes user1 --users users.json\n"
    "  or set it once:\n"
    f"  export {config.USERS_FILE_ENV}=users.json"
)

users_option = click.option(
    "--users",
    "users_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=config.USERS_FILE_ENV,
    show_envvar=True,
    help="JSON file holding a list of user records.",
)

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print the result as a JSON object."
)


def _load(users_path: Path | None) -> list[User]:
    try:
        path = users_path or config.get_users_path()
    except config.UsersFileNotSetError as e:
        raise click.ClickException(MISSING_USERS_FILE_MSG) from e
    try:
        return load_users(path)
    except UserSourceError as e:
        raise click.ClickException(str(e)) from e


def _fail(ctx: click.Context, exc: DomainError) -> None:
    logger.info("Query failed: %s", exc)
    error(str(exc))
    ctx.exit(1)


@click.command("total-likes")
@click.argument("username")
@users_option
@json_option
@click.pass_context
def total_likes(
    ctx: click.Context, username: str, users_path: Path | None, as_json: bool
) -> None:
    """Print the total number of likes across USERNAME's blogs."""
    users = _load(users_path)
    try:
        user = get_user(users, username)
    except DomainError as e:
        _fail(ctx, e)
        return
    # the user is already resolved; query just that one
    total = compute_total_likes((user,), username)
    if not user.blogs:
        warn(f"User '{username}' has no blogs; reporting 0 likes.")
    logger.info("Total likes for %s: %d", username, total)
    if as_json:
        click.echo(json.dumps({"username": username, "total_likes": total}))
    else:
        click.echo(total)


@click.command("most-popular")
@click.argument("username")
@users_option
@json_option
@click.pass_context
def most_popular(
    ctx: click.Context, username: str, users_path: Path | None, as_json: bool
) -> None:
    """Print USERNAME's blog with the most likes (the first one on ties)."""
    users = _load(users_path)
    try:
        blog = find_most_popular_blog(users, username)
    except DomainError as e:
        _fail(ctx, e)
        return
    logger.info("Most popular blog for %s: %r", username, blog.title)
    if as_json:
        click.echo(json.dumps(asdict(blog)))
    else:
        click.echo(f"{blog.title} ({blog.likes} likes)")
