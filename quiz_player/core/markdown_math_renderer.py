"""Markdown + LaTeX rendering for question statements and explanations.

Statements arrive from the scoring service as markdown that may contain
``$...$`` math. The renderer turns them into HTML and leaves the math to
MathJax inside the board's web view.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # Raw HTML from the server is escaped unless explicitly enabled.
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def render_document(
        self,
        statement: str,
        *,
        explanation: str | None = None,
        font_size: int = 14,
        title: str = "Question",
    ) -> str:
        """Render a statement, plus an optional explanation block, as a MathJax page."""
        body = f'<div class="statement">{self.render_fragment(statement)}</div>'
        if explanation and explanation.strip():
            body += f'<div class="explanation">{self.render_fragment(explanation)}</div>'
        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; font-size: {font_size}pt; }}
      .explanation {{ margin-top: 1rem; padding: 0.75rem; border-left: 4px solid #0078D4; background: #F5F5F5; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>{body}</body>
</html>"""


renderer = MarkdownMathRenderer()
