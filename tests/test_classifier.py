import pytest

from site_mirror.crawler.classifier import LinkKind, classify

SEED_HOST = "example.com"
PAGE = "https://example.com/docs/intro.html"


def run(link, base=PAGE, patterns=("mailto:",)):
    return classify(link, base, SEED_HOST, patterns)


@pytest.mark.parametrize("link", ["", "   ", None])
def test_empty_links(link):
    assert run(link).kind is LinkKind.EMPTY


def test_excluded_pattern():
    assert run("mailto:x@x.com").kind is LinkKind.EXCLUDED


def test_exclusion_wins_over_locality():
    result = run("https://example.com/private/page", patterns=("/private/",))
    assert result.kind is LinkKind.EXCLUDED
    assert result.url is None


def test_relative_link_resolves_against_page_directory():
    result = run("guide.html")
    assert result.kind is LinkKind.LOCAL
    assert result.url == "https://example.com/docs/guide.html"


def test_root_relative_and_parent_links():
    assert run("/about").url == "https://example.com/about"
    assert run("../about").url == "https://example.com/about"


def test_fragment_is_removed():
    assert run("faq#billing").url == "https://example.com/docs/faq"


def test_absolute_same_host_is_local():
    result = run("https://EXAMPLE.com/contact")
    assert result.kind is LinkKind.LOCAL
    assert result.url == "https://example.com/contact"


def test_absolute_other_host_is_foreign():
    assert run("https://external.com/").kind is LinkKind.FOREIGN


def test_protocol_relative_link_checks_host():
    assert run("//external.com/lib.js").kind is LinkKind.FOREIGN
    local = run("//example.com/lib.js")
    assert local.kind is LinkKind.LOCAL
    assert local.url == "https://example.com/lib.js"


def test_non_http_scheme_is_foreign():
    assert run("tel:+123456").kind is LinkKind.FOREIGN
    assert run("javascript:void(0)").kind is LinkKind.FOREIGN


def test_surrounding_whitespace_is_ignored():
    assert run("  /about \n").url == "https://example.com/about"


def test_links_to_bare_host_get_root_path():
    assert run("https://example.com").url == "https://example.com/"
    assert run("/", base="https://example.com").url == "https://example.com/"
    assert run("#top", base="https://example.com").url == "https://example.com/"
