"""
Tests for the URL module.
"""

import pytest

from element_mapper.models import Button, Link
from element_mapper.urls import (
    absolutize,
    discover_links,
    is_valid_seed_url,
    resolve_link,
)


class TestResolveLink:
    """Test cases for href resolution and the same-domain filter."""

    def test_absolute_path(self):
        """Test root-relative hrefs."""
        assert resolve_link("https://a.com/blog", "/post/1") == "https://a.com/post/1"

    def test_other_host_rejected(self):
        """Test that links to other hosts are rejected."""
        assert resolve_link("https://a.com/blog", "https://b.com/x") is None

    def test_subdomain_rejected(self):
        """Test that hostnames must match exactly."""
        assert resolve_link("https://a.com/", "https://www.a.com/x") is None

    @pytest.mark.parametrize(
        "base_url, href, expected",
        [
            ("https://a.com/docs/page", "sibling", "https://a.com/docs/sibling"),
            ("https://a.com/docs/", "child", "https://a.com/docs/child"),
            ("https://a.com", "about", "https://a.com/about"),
            ("https://a.com/docs/page?x=1", "next", "https://a.com/docs/next"),
        ],
    )
    def test_relative_path(self, base_url, href, expected):
        """Test hrefs relative to the base directory."""
        assert resolve_link(base_url, href) == expected

    def test_protocol_relative(self):
        """Test protocol-relative hrefs."""
        assert resolve_link("https://a.com/x", "//a.com/y") == "https://a.com/y"
        assert resolve_link("http://a.com/x", "//a.com/y") == "http://a.com/y"
        assert resolve_link("https://a.com/x", "//cdn.b.com/y") is None

    def test_absolute_same_host_kept_verbatim(self):
        """Test that absolute same-host URLs are not rewritten."""
        url = "https://a.com/search?q=shoes#results"
        assert resolve_link("https://a.com/", url) == url

    def test_port_is_kept(self):
        """Test origins with a port."""
        assert (
            resolve_link("http://localhost:8000/app/", "/login")
            == "http://localhost:8000/login"
        )

    @pytest.mark.parametrize(
        "href",
        [
            None,
            "",
            "   ",
            "#top",
            "mailto:me@a.com",
            "javascript:void(0)",
            "tel:+123",
            "ftp://a.com/file",
            "http://[invalid",
        ],
    )
    def test_rejected(self, href):
        """Test hrefs that never become candidates."""
        assert resolve_link("https://a.com/", href) is None

    def test_absolutize_does_not_filter(self):
        """Test that absolutize only builds the URL."""
        assert absolutize("https://a.com/x/y", "z") == "https://a.com/x/z"
        assert absolutize("https://a.com/x/y", "https://b.com/") == "https://b.com/"


class TestIsValidSeedUrl:
    """Test cases for seed validation."""

    def test_valid(self):
        """Test valid seed URLs."""
        assert is_valid_seed_url("https://a.com")
        assert is_valid_seed_url("http://localhost:3000/app")

    @pytest.mark.parametrize(
        "url", [None, "", "not a url", "a.com", "ftp://a.com", "https://", "http://[::1"]
    )
    def test_invalid(self, url):
        """Test malformed seed URLs."""
        assert not is_valid_seed_url(url)


class TestDiscoverLinks:
    """Test cases for candidate discovery."""

    def test_order_and_dedup(self):
        """Test discovery order, dedup, exclusions and non-link elements."""
        elements = [
            Button(selector="#go"),
            Link(selector="a", href="/b"),
            Link(selector="a", href="/a"),
            Link(selector="a", href="/b"),
            Link(selector="a", href="https://other.com/"),
            Link(selector="a", href="/"),
            Link(selector="a", href=None),
            Link(selector="a", href="c"),
        ]

        links = discover_links(
            "https://a.com/", elements, exclude={"https://a.com/"}
        )

        assert links == ["https://a.com/b", "https://a.com/a", "https://a.com/c"]

    def test_verbose_reports_rejections(self, capsys):
        """Test that rejected links are reported, not raised."""
        elements = [Link(selector="a", href="https://other.com/")]
        assert discover_links("https://a.com/", elements, verbose=True) == []
        assert "https://other.com/" in capsys.readouterr().out
