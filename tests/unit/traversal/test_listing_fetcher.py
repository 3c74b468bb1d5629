"""
Unit tests for listing traversal: URL building, pagination and the fetcher.
"""
import pytest
import requests

from regreddit.errors import FetchError
from regreddit.models import COMMENT, POST, ListingPage
from regreddit.traversal.listing_fetcher import ListingFetcher
from regreddit.traversal.pagination import PaginationHandler
from regreddit.traversal.url_builder import URLBuilder
from tests.unit.fixtures.mock_responses import (
    comment_thing,
    listing_payload,
    make_response,
    post_thing,
)


@pytest.mark.unit
class TestURLBuilder:
    """Test URLBuilder."""

    def test_listing_paths(self):
        builder = URLBuilder("testuser")

        assert builder.build_listing_path("posts") == "/user/testuser/submitted"
        assert builder.build_listing_path("comments") == "/user/testuser/comments"

    def test_unknown_listing(self):
        with pytest.raises(ValueError, match="Unknown listing"):
            URLBuilder("testuser").build_listing_path("saved")

    @pytest.mark.parametrize("username", ["", "   "])
    def test_empty_username(self, username):
        with pytest.raises(ValueError, match="Username cannot be empty"):
            URLBuilder(username)

    def test_params_first_page(self):
        assert URLBuilder.build_listing_params(limit=50) == {"limit": 50}

    def test_params_with_cursor(self):
        assert URLBuilder.build_listing_params(after="t1_x", limit=25) == {
            "limit": 25,
            "after": "t1_x",
        }

    def test_limit_capped(self):
        assert URLBuilder.build_listing_params(limit=500)["limit"] == 100

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            URLBuilder.build_listing_params(limit=-1)


@pytest.mark.unit
class TestPaginationHandler:
    """Test PaginationHandler."""

    def test_parse_page(self):
        response = make_response(200, listing_payload([post_thing("a", "rust")], after="t3_a"))

        page = PaginationHandler().parse_page(response, page_number=3)

        assert page.after == "t3_a"
        assert page.page_number == 3
        assert len(page.children) == 1

    @pytest.mark.parametrize("status", [401, 403, 404, 500])
    def test_non_2xx(self, status):
        with pytest.raises(FetchError) as exc_info:
            PaginationHandler().parse_page(make_response(status, {"error": status}))

        assert exc_info.value.status_code == status

    def test_not_a_listing(self):
        with pytest.raises(FetchError, match="Expected Listing"):
            PaginationHandler().parse_page(make_response(200, {"kind": "t3", "data": {}}))

    @pytest.mark.parametrize("data", [["oops"], "oops", 7])
    def test_data_not_an_object(self, data):
        """Test a Listing whose data is not an object raises FetchError."""
        with pytest.raises(FetchError, match="not an object"):
            PaginationHandler().parse_page(make_response(200, {"kind": "Listing", "data": data}))

    def test_not_json(self):
        with pytest.raises(FetchError, match="not JSON"):
            PaginationHandler().parse_page(make_response(200, None, text="<html>"))

    def test_has_more_pages(self):
        handler = PaginationHandler()

        assert handler.has_more_pages(ListingPage(children=[{}], after="t3_a")) is True
        assert handler.has_more_pages(ListingPage(children=[{}], after=None)) is False
        assert handler.has_more_pages(ListingPage(children=[], after="t3_b")) is False

    def test_repeated_cursor_stops(self):
        handler = PaginationHandler()
        page = ListingPage(children=[{}], after="t3_a")

        assert handler.has_more_pages(page) is True
        assert handler.has_more_pages(page) is False

    def test_reset(self):
        handler = PaginationHandler()
        page = ListingPage(children=[{}], after="t3_a")
        handler.has_more_pages(page)

        handler.reset()

        assert handler.has_more_pages(page) is True


@pytest.mark.unit
class TestListingFetcher:
    """Test ListingFetcher."""

    def test_pages_until_after_is_null(self, mock_session):
        """Test the fetcher follows cursors and stops when after is null."""
        mock_session.get.side_effect = [
            make_response(200, listing_payload([post_thing("a", "rust")], after="t3_a")),
            make_response(200, listing_payload([post_thing("b", "golang")], after=None)),
        ]
        fetcher = ListingFetcher(mock_session, "testuser", limit=1)

        items = list(fetcher.iter_posts())

        assert [i.item_id for i in items] == ["a", "b"]
        assert all(i.kind == POST for i in items)
        first_call, second_call = mock_session.get.call_args_list
        assert first_call.args[0] == "/user/testuser/submitted"
        assert first_call.kwargs["params"] == {"limit": 1}
        assert second_call.kwargs["params"] == {"limit": 1, "after": "t3_a"}

    def test_comments_listing(self, mock_session):
        mock_session.get.return_value = make_response(
            200, listing_payload([comment_thing("c", "golang")])
        )

        items = list(ListingFetcher(mock_session, "testuser").iter_comments())

        assert items[0].kind == COMMENT
        assert items[0].fullname == "t1_c"
        mock_session.get.assert_called_once()
        assert mock_session.get.call_args.args[0] == "/user/testuser/comments"

    def test_empty_listing(self, mock_session):
        mock_session.get.return_value = make_response(200, listing_payload([], after=None))

        assert list(ListingFetcher(mock_session, "testuser").iter_posts()) == []

    def test_is_lazy(self, mock_session):
        """Test no request is made until the sequence is iterated."""
        ListingFetcher(mock_session, "testuser").iter_posts()

        mock_session.get.assert_not_called()

    def test_restartable_per_call(self, mock_session):
        """Test each call starts again from the first page."""
        mock_session.get.side_effect = lambda path, params: make_response(
            200, listing_payload([post_thing("a", "rust")], after=None)
        )
        fetcher = ListingFetcher(mock_session, "testuser")

        assert len(list(fetcher.iter_posts())) == 1
        assert len(list(fetcher.iter_posts())) == 1
        for call in mock_session.get.call_args_list:
            assert "after" not in call.kwargs["params"]

    def test_fetch_error_keeps_collected_items(self, mock_session):
        """Test a failing second page raises after the first page's items were yielded."""
        mock_session.get.side_effect = [
            make_response(200, listing_payload([post_thing("a", "rust")], after="t3_a")),
            make_response(500, {"error": 500}),
        ]
        collected = []

        with pytest.raises(FetchError):
            for item in ListingFetcher(mock_session, "testuser").iter_posts():
                collected.append(item)

        assert [i.item_id for i in collected] == ["a"]

    def test_network_error_becomes_fetch_error(self, mock_session):
        mock_session.get.side_effect = requests.ConnectionError("down")

        with pytest.raises(FetchError, match="Could not fetch posts"):
            list(ListingFetcher(mock_session, "testuser").iter_posts())

    def test_unexpected_children_skipped(self, mock_session):
        """Test children that are neither posts nor comments are skipped."""
        mock_session.get.return_value = make_response(
            200,
            listing_payload([{"kind": "t5", "data": {"id": "x"}}, comment_thing("c", "golang")]),
        )

        items = list(ListingFetcher(mock_session, "testuser").iter_comments())

        assert [i.item_id for i in items] == ["c"]

    def test_non_object_children_skipped(self, mock_session):
        """Test children that are not objects are skipped, not fatal."""
        mock_session.get.return_value = make_response(
            200, listing_payload(["oops", None, 3, post_thing("p", "golang")])
        )

        items = list(ListingFetcher(mock_session, "testuser").iter_posts())

        assert [i.item_id for i in items] == ["p"]
