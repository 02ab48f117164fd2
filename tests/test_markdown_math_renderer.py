from __future__ import annotations

from quiz_player.core.markdown_math_renderer import MarkdownMathRenderer


def test_math_is_left_for_mathjax():
    html = MarkdownMathRenderer().render_fragment("What is $x^2$ when **x = 3**?")

    assert "$x^2$" in html
    assert "<strong>x = 3</strong>" in html


def test_blank_statement_gets_placeholder():
    assert "No content provided" in MarkdownMathRenderer().render_fragment("   ")


def test_raw_html_is_escaped_by_default():
    html = MarkdownMathRenderer().render_fragment("<script>alert(1)</script>")

    assert "<script>" not in html


def test_document_includes_explanation_only_when_present():
    renderer = MarkdownMathRenderer()

    with_explanation = renderer.render_document("Pick one", explanation="Because *reasons*.", title="Q <1>")
    without_explanation = renderer.render_document("Pick one", explanation="  ")

    assert '<div class="explanation">' in with_explanation
    assert "<em>reasons</em>" in with_explanation
    assert "Q &lt;1&gt;" in with_explanation
    assert '<div class="explanation">' not in without_explanation
    assert "MathJax" in without_explanation
