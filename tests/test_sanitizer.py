"""
Tests for utils/sanitizer.py

Coverage:
- HTML elements stripped, script/style content dropped
- Escaped markup stays escaped (entities never decoded)
- Non-tag text in angle brackets kept, brackets escaped
- URLs left untouched
- Nested containers rebuilt without mutating input
- Package-level exports
"""

import utils
from utils.sanitizer import sanitize, sanitize_text


class TestSanitizeText:
    """Test string cleanup."""

    def test_strip_tags(self):
        """Should remove markup around text."""
        assert sanitize_text("<i>Akira</i> <b>1988</b>") == "Akira 1988"

    def test_script_dropped_with_content(self):
        """Script elements disappear entirely."""
        assert sanitize_text("Akira<script>alert(1)</script>") == "Akira"

    def test_escaped_markup_stays_escaped(self):
        """Entity-encoded markup is not turned back into tags."""
        value = "&lt;script&gt;alert(1)&lt;/script&gt;"
        assert sanitize_text(value) == value

    def test_entities_not_decoded(self):
        """Entities pass through as written."""
        assert sanitize_text("Tom &amp; Jerry") == "Tom &amp; Jerry"

    def test_bracketed_title_kept(self):
        """Text in angle brackets that is not HTML is kept, escaped."""
        assert (
            sanitize_text("Fate/stay night <Unlimited Blade Works>")
            == "Fate/stay night &lt;Unlimited Blade Works&gt;"
        )

    def test_stray_bracket_escaped(self):
        """A lone comparison sign cannot open a tag."""
        assert sanitize_text("x < y") == "x &lt; y"

    def test_url_untouched(self):
        """Query strings with entity-like names survive intact."""
        url = "https://cdn.example/p.jpg?a=1&copy=2&not=3&reg=4"
        assert sanitize_text(url) == url

    def test_magnet_untouched(self):
        """Magnet links pass through."""
        magnet = "magnet:?xt=urn:btih:abc&dn=Akira&tr=udp://tracker.example:80"
        assert sanitize_text(magnet) == magnet

    def test_plain_text_unchanged(self):
        """Plain text passes through."""
        assert sanitize_text("Cowboy Bebop") == "Cowboy Bebop"


class TestSanitize:
    """Test recursive sanitizing."""

    def test_nested_structure(self):
        """Should clean strings at any depth."""
        data = {"title": "<b>A</b>", "episodes": [{"overview": "<p>x</p>"}]}
        assert sanitize(data) == {"title": "A", "episodes": [{"overview": "x"}]}

    def test_input_not_mutated(self):
        """Should return new containers."""
        data = {"title": "<b>A</b>"}
        sanitize(data)
        assert data == {"title": "<b>A</b>"}

    def test_scalars_untouched(self):
        """Numbers, booleans and None pass through."""
        assert sanitize({"year": 2001, "ok": True, "x": None}) == {"year": 2001, "ok": True, "x": None}


class TestExports:
    """Test package-level exports."""

    def test_utils_exports_both(self):
        """Both the record and the text sanitizer are exported."""
        assert utils.sanitize is sanitize
        assert utils.sanitize_text is sanitize_text
