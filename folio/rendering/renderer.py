"""Markdown to HTML renderer with syntax highlighting and heading anchors."""

from __future__ import annotations

import html
import logging
import re

import markdown
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from folio.exceptions import RenderError
from folio.services.slug_service import slugify

logger = logging.getLogger(__name__)

_EXTENSIONS = ["fenced_code", "tables", "toc", "sane_lists"]

# Output of the fenced_code extension for a block with a declared language.
_FENCED_CODE_RE = re.compile(
    r'<pre><code class="language-([^"\s]+)">(.*?)</code></pre>',
    flags=re.DOTALL,
)

CODE_STYLES: dict[str, str] = {
    "light": "default",
    "dark": "monokai",
}


def _new_converter() -> markdown.Markdown:
    # Markdown instances carry per-document state (toc ids), so never share one.
    return markdown.Markdown(
        extensions=_EXTENSIONS,
        extension_configs={
            "fenced_code": {"lang_prefix": "language-"},
            "toc": {"slugify": slugify, "permalink": False},
        },
        output_format="html",
    )


def _highlight_code_blocks(rendered: str) -> str:
    """Run Pygments over fenced code blocks and tag them with their language."""

    def _replace(match: re.Match[str]) -> str:
        language = match.group(1).lower()
        code = html.unescape(match.group(2))
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            logger.debug("No lexer for code block language %r, using plain text", language)
            lexer = TextLexer()
        highlighted = highlight(code, lexer, HtmlFormatter(nowrap=True))
        lang_attr = html.escape(language, quote=True)
        return (
            f'<pre class="highlight" data-language="{lang_attr}">'
            f'<code class="language-{lang_attr}">{highlighted}</code></pre>'
        )

    return _FENCED_CODE_RE.sub(_replace, rendered)


def render_markdown(body: str) -> str:
    """Render a markdown post body to HTML.

    Fenced code blocks are highlighted and carry a ``data-language``
    attribute; headings get slug-derived ``id`` attributes.  The output is
    not sanitized: post bodies are written by the site owner.

    Raises RenderError if conversion fails.
    """
    converter = _new_converter()
    try:
        rendered = converter.convert(body)
        return _highlight_code_blocks(rendered)
    except (ValueError, RecursionError) as exc:
        raise RenderError(f"Markdown rendering failed: {exc}") from exc


def pygments_css(theme: str) -> str:
    """Return the stylesheet for highlighted code in the given UI theme."""
    style = CODE_STYLES.get(theme, CODE_STYLES["light"])
    return str(HtmlFormatter(style=style).get_style_defs(".highlight"))
