"""bloglikes

Small, pure queries over users and their blogs: the total number of likes a
user collected and the user's most popular blog. The package also ships a
JSON loader and a ``bloglikes`` command-line interface around them.
"""

from bloglikes.domain.errors import DomainError, NoBlogsForUserError, UserNotFoundError
from bloglikes.domain.likes import compute_total_likes, find_most_popular_blog
from bloglikes.domain.models import Blog, User, UserCollection

__all__ = [
    "__version__",
    "Blog",
    "User",
    "UserCollection",
    "DomainError",
    "UserNotFoundError",
    "NoBlogsForUserError",
    "compute_total_likes",
    "find_most_popular_blog",
]
__version__ = "0.1.0"
