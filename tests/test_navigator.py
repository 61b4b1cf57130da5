# =============================================================================
# Navigator Tests
# =============================================================================

import pytest

from kestrel.core import LineRecord, Link, PageState, ParseError
from kestrel.navigation import Navigator
from kestrel.navigation import navigator as navigator_module

from conftest import FakeFetcher


INDEX = "http://example.com/index.html"


class TestSetURL:
    """Loading pages."""

    def test_load_replaces_page(self, navigator, fetcher):
        assert navigator.set_url(INDEX) is True

        assert navigator.url == INDEX
        assert len(navigator.links) == 3
        assert navigator.page.success
        assert fetcher.requests == [INDEX]

    def test_same_url_is_noop(self, navigator, fetcher):
        navigator.set_url(INDEX)
        navigator.cycle_forward()
        navigator.scroll_by(3)

        assert navigator.set_url(INDEX) is False
        assert fetcher.requests == [INDEX]
        assert navigator.selected_link == 0
        assert navigator.scroll_offset == 3

    def test_new_page_resets_selection_and_scroll(self, navigator):
        navigator.set_url(INDEX)
        navigator.cycle_backward()
        navigator.scroll_by(5)

        navigator.set_url("http://example.com/guide.html")

        assert navigator.selected_link is None
        assert navigator.scroll_offset == 0

    def test_fetch_failure_gives_error_page(self, navigator):
        navigator.set_url(INDEX)
        navigator.cycle_forward()

        navigator.set_url("http://unreachable.invalid/")

        assert navigator.url == "http://unreachable.invalid/"
        assert navigator.links == ()
        assert len(navigator.page.lines) == 1
        assert not navigator.page.lines[0].is_link
        assert navigator.page.lines[0].text.startswith("Error fetching URL:")
        assert navigator.selected_link is None
        assert not navigator.page.success

    def test_bad_base_address_gives_error_page(self):
        nav = Navigator(FakeFetcher({"no-scheme/page": "<body><p>x</p></body>"}))

        nav.set_url("no-scheme/page")

        assert nav.links == ()
        assert nav.page.lines[0].text.startswith("Invalid address:")

    def test_parse_failure_gives_error_page(self, navigator, monkeypatch):
        def broken(content, base):
            raise ParseError("parser gave up")

        monkeypatch.setattr(navigator_module, "flatten_document", broken)
        navigator.set_url(INDEX)

        assert navigator.page.lines == (LineRecord("Error parsing document: parser gave up"),)

    def test_reload_fetches_again(self, navigator, fetcher):
        navigator.set_url(INDEX)
        navigator.cycle_forward()

        navigator.reload()

        assert fetcher.requests == [INDEX, INDEX]
        assert navigator.selected_link is None

    def test_reload_without_page_does_nothing(self, navigator, fetcher):
        navigator.reload()
        assert fetcher.requests == []


class TestSelection:
    """Cycling through links."""

    def test_forward_from_none_selects_first(self, navigator):
        navigator.set_url(INDEX)
        navigator.cycle_forward()
        assert navigator.selected_link == 0

    def test_backward_from_none_selects_last(self, navigator):
        navigator.set_url(INDEX)
        navigator.cycle_backward()
        assert navigator.selected_link == 2

    def test_forward_has_period_of_link_count(self, navigator):
        navigator.set_url(INDEX)
        navigator.cycle_forward()
        seen = []
        for _ in range(len(navigator.links)):
            seen.append(navigator.selected_link)
            navigator.cycle_forward()

        assert sorted(seen) == [0, 1, 2]
        assert navigator.selected_link == seen[0]

    def test_backward_inverts_forward(self, navigator):
        navigator.set_url(INDEX)
        for start in range(len(navigator.links)):
            navigator.state.selected_link = start
            navigator.cycle_forward()
            navigator.cycle_backward()
            assert navigator.selected_link == start

    def test_cycling_without_links_keeps_none(self, navigator):
        navigator.set_url("http://example.com/guide.html")
        navigator.cycle_forward()
        navigator.cycle_backward()
        assert navigator.selected_link is None

    def test_selected_target(self, navigator):
        navigator.set_url(INDEX)
        assert navigator.selected_target() is None

        navigator.cycle_forward()
        assert navigator.selected_target() == Link(
            target="http://example.com/docs/intro.html", label="introduction"
        )


class TestActivation:
    """Following links."""

    def test_follow_selected_link(self, navigator, fetcher):
        navigator.set_url(INDEX)
        navigator.cycle_forward()

        assert navigator.activate_selection() is True
        assert navigator.url == "http://example.com/docs/intro.html"
        assert navigator.links[0].target == "http://example.com/index.html"
        assert navigator.selected_link is None

    def test_nothing_selected_does_nothing(self, navigator, fetcher):
        navigator.set_url(INDEX)

        assert navigator.activate_selection() is False
        assert fetcher.requests == [INDEX]

    def test_following_link_to_current_page_is_noop(self):
        page = "<body><a href='index.html'>self</a></body>"
        fetcher = FakeFetcher({INDEX: page})
        nav = Navigator(fetcher)
        nav.set_url(INDEX)
        nav.cycle_forward()

        assert nav.activate_selection() is False
        assert fetcher.requests == [INDEX]


class TestScrolling:
    """Scroll offset handling."""

    def test_scroll_saturates_at_top(self, navigator):
        navigator.set_url(INDEX)
        navigator.scroll_by(-10)
        assert navigator.scroll_offset == 0

    def test_render_clamps_stored_offset(self, navigator):
        navigator.set_url(INDEX)
        navigator.scroll_by(100)

        projection = navigator.render(viewport_height=5)

        total = len(navigator.page.lines)
        assert projection.scroll_offset == total - 5
        assert navigator.scroll_offset == total - 5
        assert len(projection.lines) == 5

    def test_render_follows_viewport_resize(self, navigator):
        navigator.set_url(INDEX)
        navigator.scroll_by(100)
        navigator.render(viewport_height=5)

        navigator.render(viewport_height=50)

        assert navigator.scroll_offset == 0


class TestQuit:
    def test_quit_stops_loop(self, navigator):
        assert navigator.running
        navigator.quit()
        assert not navigator.running


class TestPageState:
    """Construction-time invariants of the page model."""

    def test_linked_record_must_exist(self):
        with pytest.raises(ValueError):
            PageState(url=INDEX, lines=[LineRecord("dangling", link_index=0)])

    def test_error_page_has_single_plain_line(self):
        page = PageState.error_page(INDEX, "boom")
        assert page.links == ()
        assert page.lines == (LineRecord("boom"),)
        assert page.error == "boom"
