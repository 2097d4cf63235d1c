"""Markdown rendering and the HTML page wrapped around it."""

import html
import logging
from functools import cache
from importlib.resources import files
from pathlib import Path

import markdown

from mdlive.config import PollWindow

logger = logging.getLogger(__name__)

# GitHub-flavoured output: tables, fenced code, and every newline a <br>
MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "nl2br"]

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
    <head>
        <meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
        <style>
            body {{
                box-sizing: border-box;
                min-width: 200px;
                max-width: 980px;
                margin: 0 auto;
                padding: 45px;
            }}
        </style>
        <link rel="stylesheet" href="/style.css">
        <title>{title}</title>
    </head>
    <body>
        <article class="markdown-body">
{body}
        </article>
        <script type="text/javascript">
        function reload_check() {{
            var xhr = new XMLHttpRequest();
            xhr.overrideMimeType("text/plain");
            xhr.onreadystatechange = function () {{
                if (this.readyState == 4 && this.status == 200) {{
                    if (this.responseText == "yes") {{
                        location.reload();
                    }}
                }}
            }};
            xhr.open("GET", "{update_path}", true);
            xhr.send();
        }}
        reload_check();
        window.setInterval(reload_check, {interval_ms});
        </script>
    </body>
</html>
"""


def render_markdown(text: str) -> str:
    """Convert markdown source to an HTML fragment."""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def render_file(path: Path) -> str:
    """Render the markdown file at ``path``.

    Errors reading or converting the file are rendered into the fragment
    instead of raised, so the browser keeps polling and picks up the fix.
    """
    try:
        return render_markdown(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to render {path}: {e}")
        return f"mdlive encountered an error: <br> {html.escape(repr(e))}"


def render_page(
    path: Path,
    window: PollWindow,
    update_path: str = "/update",
) -> str:
    """Build the full HTML document for ``path``.

    The embedded script checks ``update_path`` on load and then once per
    poll window, reloading the page when the answer is "yes".
    """
    return PAGE_TEMPLATE.format(
        title=html.escape(str(path)),
        body=render_file(path),
        update_path=update_path,
        interval_ms=window.total_ms,
    )


@cache
def load_stylesheet() -> bytes:
    """Return the bundled GitHub-like markdown stylesheet."""
    return files("mdlive").joinpath("resources/github-markdown.css").read_bytes()
