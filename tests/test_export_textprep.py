"""Tests for printable line preparation."""

from __future__ import annotations

import random
from typing import Any

import pytest

from mdview.export import textprep
from mdview.export.textprep import (
    prepare_lines,
    prepare_markdown_lines,
    strip_inline_markdown,
    wrap_text,
)

WORDS = ["a", "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "x" * 25, "elit"]


def test_wrap_short_text_unchanged() -> None:
    assert wrap_text("short", 80) == ["short"]
    assert wrap_text("", 80) == [""]
    assert wrap_text("  indented", 80) == ["  indented"]


def test_wrap_greedy() -> None:
    assert wrap_text("aaa bbb ccc ddd", 7) == ["aaa bbb", "ccc ddd"]


def test_wrap_long_word_not_split() -> None:
    assert wrap_text("a verylongword b", 5) == ["a", "verylongword", "b"]


def test_wrap_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        wrap_text("text", 0)


@pytest.mark.parametrize("width", [5, 10, 20, 80])
def test_wrap_properties(width: int) -> None:
    rng = random.Random(width)
    for _ in range(50):
        text = " ".join(rng.choice(WORDS) for _ in range(rng.randint(1, 60)))
        lines = wrap_text(text, width)
        for line in lines:
            assert len(line) <= width or " " not in line
        assert " ".join(lines) == text


def test_strip_inline_markdown() -> None:
    assert strip_inline_markdown("**b** *i* `c` [l](u)") == "b i [c] l"
    assert strip_inline_markdown("no markup") == "no markup"


def test_plain_mode_keeps_every_line() -> None:
    assert prepare_lines("one\n\ntwo", "plain") == ["one", "", "two"]
    assert prepare_lines("# not a header", "plain") == ["# not a header"]


def test_plain_mode_wraps_each_line() -> None:
    lines = prepare_lines("aaa bbb ccc\nddd", "plain", wrap_width=7)
    assert lines == ["aaa bbb", "ccc", "ddd"]


def test_markdown_mode() -> None:
    text = (
        "# Title\n"
        "## Sub\n"
        "### Small\n"
        "- item **b**\n"
        "* other\n"
        "> quote `x`\n"
        "Plain [link](http://a) *it*\n"
        "\n"
        "end"
    )
    assert prepare_markdown_lines(text) == [
        "■ Title",
        "",
        "▪ Sub",
        "",
        "• Small",
        "",
        "  • item b",
        "  • other",
        '  " quote [x]',
        "Plain link it",
        "",
        "",
        "end",
        "",
    ]


def test_markdown_mode_trims_and_wraps_paragraphs() -> None:
    lines = prepare_lines("   aaa bbb ccc   ", "markdown", wrap_width=7)
    assert lines == ["aaa bbb", "ccc", ""]


def test_deeper_headers_are_paragraphs() -> None:
    assert prepare_lines("#### Deep", "markdown") == ["#### Deep", ""]


def test_crlf_input() -> None:
    assert prepare_lines("a\r\nb", "plain") == ["a", "b"]


def test_unknown_mode() -> None:
    with pytest.raises(ValueError):
        prepare_lines("text", "html")  # type: ignore[arg-type]


def test_fallback_on_preparation_failure(monkeypatch: Any) -> None:
    def boom(text: str, max_length: int = 80) -> list[str]:
        raise RuntimeError("boom")

    monkeypatch.setattr(textprep, "wrap_text", boom)
    text = "x" * 1500
    assert prepare_lines(text, "plain") == [
        "Content processing error occurred.",
        "Original content:",
        "x" * 1000,
    ]
    assert prepare_lines(text, "markdown", fallback_chars=10)[-1] == "x" * 10
