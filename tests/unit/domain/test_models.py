"""Unit tests for the user/blog data model."""

import dataclasses

import pytest

from bloglikes.domain.models import Blog, User

# pylint: disable=magic-value-comparison


class TestBlog:
    """Tests for the Blog value object."""

    @staticmethod
    def test_structural_equality():
        """Two blogs with the same fields compare equal."""
        assert Blog("Entry 1", 130, "Blog 1 Content...") == Blog(
            title="Entry 1", likes=130, content="Blog 1 Content..."
        )

    @staticmethod
    def test_is_immutable():
        """Blogs cannot be modified after creation."""
        blog = Blog("Entry 1", 130, "Blog 1 Content...")
        with pytest.raises(dataclasses.FrozenInstanceError):
            blog.likes = 0  # type: ignore[misc]


class TestUser:
    """Tests for the User record."""

    @staticmethod
    def test_blogs_default_to_empty():
        """A user created without blogs has an empty blog tuple."""
        assert User("user1").blogs == ()

    @staticmethod
    def test_blog_list_is_stored_as_tuple(make_blog):
        """A list of blogs is normalized to a tuple, keeping its order."""
        first, second = make_blog(likes=1), make_blog(likes=2)
        user = User("user1", [first, second])  # type: ignore[arg-type]
        assert user.blogs == (first, second)

    @staticmethod
    def test_normalized_users_compare_equal(make_blog):
        """Users built from a list or a tuple of the same blogs are equal."""
        blog = make_blog()
        assert User("user1", [blog]) == User("user1", (blog,))  # type: ignore[arg-type]

    @staticmethod
    def test_is_immutable():
        """Users cannot be modified after creation."""
        user = User("user1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            user.username = "user2"  # type: ignore[misc]


class TestBlogValidation:
    """Like counts must be non-negative integers."""

    @staticmethod
    @pytest.mark.parametrize("likes", ["5", 1.0, True, None])
    def test_non_integer_likes(likes):
        """Anything but an int (bools included) is a TypeError."""
        with pytest.raises(TypeError, match="Blog likes must be an integer"):
            Blog("t", likes, "c")

    @staticmethod
    def test_negative_likes():
        """Negative like counts are a ValueError."""
        with pytest.raises(ValueError, match="must not be negative, got -3"):
            Blog("t", -3, "c")

    @staticmethod
    def test_zero_likes_allowed():
        """Zero is a valid like count."""
        assert Blog("t", 0, "c").likes == 0


class TestUserValidation:
    """Blogs must be a sequence of Blog records."""

    @staticmethod
    def test_string_blogs_rejected():
        """A string is not split into characters."""
        with pytest.raises(TypeError, match="got a string"):
            User("u", "ab")  # type: ignore[arg-type]

    @staticmethod
    def test_non_blog_items_rejected(make_blog):
        """Every item has to be a Blog."""
        with pytest.raises(TypeError, match="must hold Blog, got int"):
            User("u", [make_blog(), 0])  # type: ignore[list-item]
