"""Tests for PostFilter and Visibility."""

from datetime import datetime, timedelta, timezone

from foro.domain.repository import PostFilter, Visibility
from tests.conftest import BASE_TIME, make_author, make_post


class TestVisibility:
    """Tests for soft-delete visibility."""

    def test_admits(self):
        assert Visibility.ACTIVE.admits(None)
        assert not Visibility.ACTIVE.admits(BASE_TIME)
        assert Visibility.DELETED.admits(BASE_TIME)
        assert not Visibility.DELETED.admits(None)
        assert Visibility.ALL.admits(None)
        assert Visibility.ALL.admits(BASE_TIME)

    def test_filter_visibility(self):
        assert PostFilter().visibility is Visibility.ACTIVE
        assert PostFilter(deleted=False).visibility is Visibility.ACTIVE
        assert PostFilter(deleted=True).visibility is Visibility.DELETED


class TestPostFilterMatches:
    """Tests for in-memory filter evaluation."""

    def test_empty_filter_hides_deleted(self):
        post = make_post()
        assert PostFilter().matches(post)

        post.deleted_at = BASE_TIME
        assert not PostFilter().matches(post)
        assert PostFilter(deleted=True).matches(post)

    def test_author_is_exact(self):
        post = make_post(authors=[make_author("a1"), make_author("a22")])

        assert PostFilter(author_id="a22").matches(post)
        assert not PostFilter(author_id="a2").matches(post)

    def test_tag_is_case_insensitive_substring(self):
        post = make_post(tags=["Python"])

        assert PostFilter(tag="pyth").matches(post)
        assert PostFilter(tag="PYTHON").matches(post)
        assert not PostFilter(tag="rust").matches(post)

    def test_blank_criteria_are_unset(self):
        post = make_post(tags=["python"])
        blank = PostFilter(author_id="", tag="  ", search="")

        assert (blank.author_id, blank.tag, blank.search) == (None, None, None)
        assert blank.matches(post)
        assert blank.matches(make_post(tags=[]))

    def test_date_bounds_are_inclusive(self):
        post = make_post()

        assert PostFilter(date_from=BASE_TIME, date_to=BASE_TIME).matches(post)
        assert not PostFilter(date_from=BASE_TIME + timedelta(seconds=1)).matches(post)
        assert not PostFilter(date_to=BASE_TIME - timedelta(seconds=1)).matches(post)

    def test_naive_bounds_are_utc(self):
        filters = PostFilter(date_from=datetime(2024, 1, 1, 12, 0))

        assert filters.date_from.tzinfo == timezone.utc
        assert filters.matches(make_post())

    def test_search_covers_title_body_and_tags(self):
        post = make_post(title="Async IO", body="Event loops explained", tags=["Concurrency"])

        assert PostFilter(search="async").matches(post)
        assert PostFilter(search="LOOPS").matches(post)
        assert PostFilter(search="concur").matches(post)
        assert not PostFilter(search="threads").matches(post)

    def test_search_is_literal(self):
        """Regex and LIKE metacharacters have no special meaning."""
        post = make_post(title="Discount of 50% today", body="body")

        assert PostFilter(search="50%").matches(post)
        assert not PostFilter(search=".*").matches(post)
        assert not PostFilter(search="%").matches(make_post(title="plain", body="text"))

    def test_criteria_combine_with_and(self):
        post = make_post(tags=["python"])

        assert PostFilter(author_id="a1", tag="py").matches(post)
        assert not PostFilter(author_id="a1", tag="rust").matches(post)
