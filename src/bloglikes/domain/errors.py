"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Like query errors
# ============================================================================


class UserNotFoundError(DomainError):
    """Raised when no user in the collection has the requested username."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User '{username}' was not found.")
        self.username = username


class NoBlogsForUserError(DomainError):
    """Raised when a most-popular query targets a user without any blogs."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User '{username}' has no blogs.")
        self.username = username
