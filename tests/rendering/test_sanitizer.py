"""Tests for storefront/rendering/sanitizer.py"""

import pytest
from bs4 import BeautifulSoup

from storefront.rendering.sanitizer import is_safe_href, sanitize_html


def parse_anchor(markup):
    return BeautifulSoup(sanitize_html(markup), "html.parser").a


class TestDisallowedTags:
    def test_script_removed_with_content(self):
        assert sanitize_html("<p>hi<script>alert(1)</script></p>") == "<p>hi</p>"

    def test_style_removed_with_content(self):
        assert sanitize_html("<style>p { color: red }</style><p>x</p>") == "<p>x</p>"

    def test_unknown_tag_flattened_to_text(self):
        assert sanitize_html("<div><span>Hej</span> verden</div>") == "Hej verden"

    def test_allowed_markup_inside_disallowed_is_flattened(self):
        assert sanitize_html("<div><strong>Stærk</strong> kaffe</div>") == "Stærk kaffe"

    def test_script_inside_disallowed_is_dropped(self):
        assert sanitize_html("<div>a<script>b()</script></div>") == "a"

    def test_image_with_handler_disappears(self):
        assert sanitize_html('<img src="x" onerror="alert(1)">') == ""

    def test_flattened_text_is_escaped(self):
        result = sanitize_html("<div>&lt;script&gt;alert(1)&lt;/script&gt;</div>")
        assert "<script>" not in result
        assert "&lt;script&gt;" in result

    def test_comments_removed(self):
        assert sanitize_html("<p>a<!-- skjult --></p>") == "<p>a</p>"


class TestAllowedTags:
    def test_lists_kept(self):
        markup = "<ul><li>a</li><li><em>b</em></li></ul><ol><li>c</li></ol>"
        assert sanitize_html(markup) == markup

    def test_line_break_kept(self):
        result = sanitize_html("a<br>b")
        assert BeautifulSoup(result, "html.parser").find("br") is not None

    def test_attributes_stripped(self):
        markup = '<p style="color:red" class="x" onclick="y()">a <strong id="s">b</strong></p>'
        assert sanitize_html(markup) == "<p>a <strong>b</strong></p>"

    def test_uppercase_tags(self):
        assert sanitize_html('<P CLASS="x">Hej</P>') == "<p>Hej</p>"


class TestAnchors:
    def test_javascript_href_and_handler_removed(self):
        anchor = parse_anchor('<a href="javascript:x" onclick="y">link</a>')
        assert anchor.get("href") is None
        assert anchor.get("onclick") is None
        assert " ".join(anchor.get_attribute_list("rel")) == "noopener noreferrer"
        assert anchor.get("target") == "_blank"
        assert anchor.get_text() == "link"

    def test_exact_output(self):
        result = sanitize_html('<a href="javascript:x" onclick="y">link</a>')
        assert result == '<a rel="noopener noreferrer" target="_blank">link</a>'

    def test_safe_href_kept(self):
        result = sanitize_html('<a href="https://example.com/kaffe" class="btn" title="Læs mere">Læs</a>')
        assert result == (
            '<a href="https://example.com/kaffe" title="Læs mere" '
            'rel="noopener noreferrer" target="_blank">Læs</a>'
        )

    @pytest.mark.parametrize("href", [
        "http://example.com",
        "HTTPS://EXAMPLE.COM",
        "mailto:butik@example.com",
        "tel:+4512345678",
    ])
    def test_allowed_schemes(self, href):
        assert parse_anchor(f'<a href="{href}">x</a>').get("href") == href

    @pytest.mark.parametrize("href", [
        "javascript:alert(1)",
        "JavaScript:alert(1)",
        " javascript:alert(1)",
        "&#106;avascript:alert(1)",
        "data:text/html,<b>x</b>",
        "/relative/path",
        "",
    ])
    def test_rejected_hrefs(self, href):
        assert parse_anchor(f'<a href="{href}">x</a>').get("href") is None

    def test_any_on_attribute_removed(self):
        anchor = parse_anchor('<a href="https://x" ONMOUSEOVER="a()" onfocus="b()">x</a>')
        assert anchor.get("onmouseover") is None
        assert anchor.get("onfocus") is None
        assert anchor.get("href") == "https://x"

    def test_rel_and_target_forced(self):
        anchor = parse_anchor('<a href="https://x" rel="opener" target="_self">x</a>')
        assert " ".join(anchor.get_attribute_list("rel")) == "noopener noreferrer"
        assert anchor.get("target") == "_blank"

    def test_nested_anchor_content_sanitized(self):
        result = sanitize_html('<a href="https://x"><span>Se</span> <em onclick="z">mere</em></a>')
        anchor = BeautifulSoup(result, "html.parser").a
        assert anchor.find("span") is None
        assert anchor.em.attrs == {}


class TestEdgeCases:
    def test_empty(self):
        assert sanitize_html("") == ""

    def test_none(self):
        assert sanitize_html(None) == ""

    def test_plain_text(self):
        assert sanitize_html("  Frisk te  ") == "Frisk te"

    def test_trims_markup(self):
        assert sanitize_html("  <p>a</p>\n") == "<p>a</p>"

    def test_deep_nesting(self):
        result = sanitize_html("<em>" * 1200 + "x" + "</em>" * 1200)
        assert result == "<em>" * 1200 + "x" + "</em>" * 1200

    def test_deep_nesting_strips_attributes_at_every_level(self):
        result = sanitize_html('<strong class="a">' * 1100 + "<span>x</span>" + "</strong>" * 1100)
        assert result == "<strong>" * 1100 + "x" + "</strong>" * 1100


class TestIsSafeHref:
    def test_safe(self):
        assert is_safe_href("https://example.com")

    def test_unsafe(self):
        assert not is_safe_href("javascript:void(0)")
        assert not is_safe_href("")
