"""Data model shared across the domain layer."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(frozen=True)
class Blog:
    """Value object representing a single blog entry and its like count.

    ``likes`` must be a non-negative ``int``; ``bool`` is rejected.
    """

    title: str
    likes: int
    content: str

    def __post_init__(self) -> None:
        if isinstance(self.likes, bool) or not isinstance(self.likes, int):
            raise TypeError(
                f"Blog likes must be an integer, got {type(self.likes).__name__}"
            )
        if self.likes < 0:
            raise ValueError(f"Blog likes must not be negative, got {self.likes}")


@dataclass(frozen=True)
class User:
    """A user identified by ``username`` and the blogs they wrote.

    ``blogs`` keeps insertion order. Lists are stored as tuples so that a
    ``User`` can be hashed and cannot be changed under a running query.
    """

    username: str
    blogs: tuple[Blog, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.blogs, (str, bytes)):
            raise TypeError("User blogs must be a sequence of Blog, got a string")
        blogs = tuple(self.blogs)
        if bad := [b for b in blogs if not isinstance(b, Blog)]:
            raise TypeError(
                f"User blogs must hold Blog, got {type(bad[0]).__name__}"
            )
        object.__setattr__(self, "blogs", blogs)


UserCollection: TypeAlias = Sequence[User]
