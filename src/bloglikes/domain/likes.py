"""Like-count queries over a collection of users.

Both queries are pure: they only read the records they are given and always
return the same result for the same input.

- :func:`compute_total_likes` sums the likes over a user's blogs.
- :func:`find_most_popular_blog` returns the user's blog with the most likes;
  ties go to the blog that appears first.

A missing user is reported with :class:`~bloglikes.domain.errors.UserNotFoundError`
so that it can never be mistaken for a legitimate total of 0.
"""

from bloglikes.domain.errors import NoBlogsForUserError, UserNotFoundError
from bloglikes.domain.models import Blog, User, UserCollection


def find_user(users: UserCollection, username: str) -> User | None:
    """Return the first user whose username equals ``username``, or None."""
    return next((user for user in users if user.username == username), None)


def get_user(users: UserCollection, username: str) -> User:
    """Return the first user whose username equals ``username``.

    Raises:
        UserNotFoundError: If no user matches.
    """
    if (user := find_user(users, username)) is None:
        raise UserNotFoundError(username)
    return user


def compute_total_likes(users: UserCollection, username: str) -> int:
    """Sum the likes over all blogs of the user named ``username``.

    Args:
        users: Users to search, in order; the first match wins.
        username: Exact username to look up.

    Returns:
        The total number of likes, 0 when the user has no blogs.

    Raises:
        UserNotFoundError: If no user matches ``username``.
    """
    user = get_user(users, username)
    return sum((blog.likes for blog in user.blogs), 0)


def find_most_popular_blog(users: UserCollection, username: str) -> Blog:
    """Return the blog with the most likes for the user named ``username``.

    A blog only replaces the current best when it has strictly more likes, so
    ties keep the earliest blog. The search starts from "no best yet" rather
    than from a like count, which lets a blog with 0 likes win when none of
    the others has more.

    Args:
        users: Users to search, in order; the first match wins.
        username: Exact username to look up.

    Returns:
        The winning ``Blog`` record itself.

    Raises:
        UserNotFoundError: If no user matches ``username``.
        NoBlogsForUserError: If the user has no blogs.
    """
    user = get_user(users, username)
    best: Blog | None = None
    for blog in user.blogs:
        if best is None or blog.likes > best.likes:
            best = blog
    if best is None:
        raise NoBlogsForUserError(username)
    return best
