"""Unit tests for marker.api.check.classify_target."""

import pytest

from marker.api.check.Classification import Malformed, RelativePath, UrlTarget
from marker.api.check.classify_target import classify_target

pytestmark = pytest.mark.check


@pytest.mark.parametrize(
    "target",
    [
        "https://example.com",
        "http://example.com/a/b?q=1#frag",
        "http://[::1]:8080/",
        "mailto:someone@example.com",
        "ftp://files.example.com/pub",
    ],
)
def test_urls(target):
    assert classify_target(target) == UrlTarget(target)


@pytest.mark.parametrize("target", ["./foo.md", "foo.md#anchor", "../bar.md", "#anchor", "", "/abs/path.md"])
def test_relative_paths(target):
    assert classify_target(target) == RelativePath(target)


@pytest.mark.parametrize(
    ("target", "message"),
    [
        ("http://[::1/", "invalid IPv6 address"),
        ("http://example.com:99999/", "invalid port number"),
        ("http://example.com:port/", "invalid port number"),
        ("http://", "empty host"),
        ("https:", "empty host"),
        ("https://exa mple.com/", "invalid domain character"),
        ("//example.com:bad/x", "invalid port number"),
    ],
)
def test_malformed(target, message):
    assert classify_target(target) == Malformed(message)


def test_scheme_without_authority_is_url():
    assert isinstance(classify_target("tel:+1-555-0100"), UrlTarget)


@pytest.mark.parametrize(
    ("target", "url"),
    [
        ("http:foo", "http://foo"),
        ("http:/foo/bar", "http://foo/bar"),
        ("http:///path", "http://path"),
        ("https:\\\\example.com", "https://example.com"),
    ],
)
def test_special_scheme_without_double_slash(target, url):
    assert classify_target(target) == UrlTarget(url)
