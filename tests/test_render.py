"""Tests for markdown rendering and the page template."""

from pathlib import Path

from mdlive.config import PollWindow
from mdlive.render import load_stylesheet, render_file, render_markdown, render_page


class TestRenderMarkdown:
    """Tests for render_markdown."""

    def test_heading_and_paragraph(self):
        html = render_markdown("# Title\n\nSome *text*.")
        assert "<h1>Title</h1>" in html
        assert "<em>text</em>" in html

    def test_newlines_are_hard_breaks(self):
        html = render_markdown("first line\nsecond line")
        assert "first line<br />" in html

    def test_fenced_code(self):
        html = render_markdown("```\nprint('hi')\n```")
        assert "<pre><code>" in html
        assert "print(&#x27;hi&#x27;)" in html or "print('hi')" in html

    def test_tables(self):
        html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<td>1</td>" in html


class TestRenderFile:
    """Tests for render_file."""

    def test_renders_file(self, notes_file: Path):
        assert "<h1>Notes</h1>" in render_file(notes_file)

    def test_missing_file_renders_error(self, tmp_path: Path):
        """A missing file produces an error message, not an exception."""
        html = render_file(tmp_path / "gone.md")
        assert html.startswith("mdlive encountered an error: <br>")
        assert "FileNotFoundError" in html

    def test_invalid_utf8_renders_error(self, tmp_path: Path):
        path = tmp_path / "binary.md"
        path.write_bytes(b"\xff\xfe\xfa")

        assert "UnicodeDecodeError" in render_file(path)


class TestRenderPage:
    """Tests for render_page."""

    def test_page_wraps_content(self, notes_file: Path):
        page = render_page(notes_file, PollWindow())

        assert page.startswith("<!DOCTYPE html>")
        assert f"<title>{notes_file}</title>" in page
        assert '<article class="markdown-body">' in page
        assert "<h1>Notes</h1>" in page
        assert '<link rel="stylesheet" href="/style.css">' in page

    def test_page_polls_for_updates(self, notes_file: Path):
        """The script polls the update path once per poll window."""
        page = render_page(notes_file, PollWindow(timeout_seconds=5, poll_interval_ms=50))

        assert 'xhr.open("GET", "/update", true);' in page
        assert "window.setInterval(reload_check, 250);" in page
        assert 'this.responseText == "yes"' in page

    def test_custom_update_path(self, notes_file: Path):
        page = render_page(notes_file, PollWindow(), update_path="/reload")
        assert '"/reload"' in page

    def test_title_is_escaped(self, tmp_path: Path):
        path = tmp_path / "<b>&.md"
        path.write_text("hi")

        page = render_page(path, PollWindow())

        assert "&lt;b&gt;&amp;.md</title>" in page


class TestStylesheet:
    """Tests for the bundled stylesheet."""

    def test_stylesheet_is_bundled(self):
        css = load_stylesheet()
        assert b".markdown-body" in css
