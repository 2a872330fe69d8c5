"""Unit tests for core/render/convert.py: end-to-end conversion properties"""

import random

import pytest

from mdblog.core.render.convert import md_to_html


@pytest.mark.parametrize("md", [None, ""])
def test_empty_input(md):
    assert md_to_html(md) == ""


def test_code_fence_round_trip():
    out = md_to_html("```js\nconst x = 1 < 2;\n```")
    assert out == '<pre><code class="language-js">const x = 1 &lt; 2;\n</code></pre>'


def test_code_fence_untouched_by_inline_rules():
    out = md_to_html("```\na *b* **c** [l](u) `d`\n# not heading\n- not item\n```")
    assert "a *b* **c** [l](u) `d`\n# not heading\n- not item\n" in out
    for tag in ("<em>", "<strong>", "<a ", "<h1>", "<li>", "<p>"):
        assert tag not in out


def test_nested_lists():
    out = md_to_html("- parent\n  - child")
    assert out == "<ul>\n<li>parent\n<ul>\n<li>child\n</li>\n</ul>\n</li>\n</ul>"


def test_mixed_kind_same_level():
    out = md_to_html("1. one\n- two")
    assert out == "<ol>\n<li>one\n</li>\n</ol>\n<ul>\n<li>two\n</li>\n</ul>"


def test_blank_line_list_termination():
    out = md_to_html("- a\n\n- b")
    assert out == "<ul>\n<li>a\n</li>\n</ul>\n<ul>\n<li>b\n</li>\n</ul>"


def test_inline_precedence():
    out = md_to_html("**bold *and italic* text**")
    assert out == "<p><strong>bold <em>and italic</em> text</strong></p>"


def test_blockquote_single_element_no_paragraph():
    assert md_to_html("> line one\n> line two") == "<blockquote>line one<br>line two</blockquote>"


def test_blockquote_after_text_is_its_own_block():
    assert md_to_html("intro\n> q") == "<p>intro</p>\n<blockquote>q</blockquote>"


def test_blockquote_gets_inline_formatting():
    assert md_to_html("> **hi**") == "<blockquote><strong>hi</strong></blockquote>"


def test_blockquote_not_double_escaped():
    assert md_to_html("> a & b") == "<blockquote>a &amp; b</blockquote>"


def test_heading_precedence():
    out = md_to_html("###### Six")
    assert out == "<h6>Six</h6>"
    assert "<h1>" not in md_to_html("######")


def test_headings_inline_formatting():
    assert md_to_html("## A *b*") == "<h2>A <em>b</em></h2>"


def test_html_is_escaped():
    out = md_to_html("<script>alert(1)</script> & more")
    assert out == "<p>&lt;script&gt;alert(1)&lt;/script&gt; &amp; more</p>"


def test_crlf_input():
    assert md_to_html("# T\r\n\r\ntext") == "<h1>T</h1>\n<p>text</p>"


def test_unterminated_fence_degrades_to_text():
    out = md_to_html("```js\nx = 1")
    assert "<pre>" not in out
    assert out.startswith("<p>")


def test_code_fence_inside_paragraph_is_lifted_out():
    out = md_to_html("before\n```\ncode\n```\nafter")
    assert out == "<p>before</p>\n<pre><code>code\n</code></pre>\n<p>after</p>"


def test_horizontal_rule():
    assert md_to_html("a\n\n---\n\nb") == "<p>a</p>\n<hr>\n<p>b</p>"


def test_nul_in_input_cannot_forge_placeholder():
    out = md_to_html("\x00CODEBLOCK_0\x00")
    assert out == "<p>CODEBLOCK_0</p>"


def test_full_document(sample_md):
    out = md_to_html(sample_md)
    assert "<h1>Post title</h1>" in out
    assert (
        '<p>An intro paragraph with <strong>bold</strong> and a '
        '<a href="https://example.com">link</a>.<br>Second line of the intro.</p>'
    ) in out
    assert "<h2>Steps</h2>" in out
    assert "<ol>\n<li>first\n</li>\n<li>second\n<ul>\n<li>detail\n</li>\n</ul>\n</li>\n</ol>" in out
    assert "<blockquote>quoted <em>text</em><br>across lines</blockquote>" in out
    assert (
        '<pre><code class="language-python">if a &lt; b and c:\n'
        '    print("**not bold**")\n</code></pre>'
    ) in out
    assert "<hr>" in out
    assert out.endswith("<p>The end.</p>")


ALPHABET = "ab #*-+>`[]()!_.1\n\n\t  \r<&\x00\u00e9"


def test_fuzz_never_raises():
    """Random markdown-ish text always converts to a string with no leftover placeholders."""
    rng = random.Random(20261019)
    for _ in range(500):
        md = "".join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 200)))
        out = md_to_html(md)
        assert isinstance(out, str)
        assert "\x00" not in out


def test_fuzz_random_bytes():
    rng = random.Random(7)
    for _ in range(200):
        raw = bytes(rng.randrange(256) for _ in range(rng.randint(0, 120)))
        assert isinstance(md_to_html(raw.decode("latin-1")), str)


def test_triple_marker_is_well_formed():
    assert md_to_html("***x***") == "<p><em><strong>x</strong></em></p>"
