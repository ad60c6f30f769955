r"""Regular-expression based markdown to HTML body conversion.

This is deliberately not a markdown parser.  :func:`convert_markdown` runs a
fixed sequence of global substitutions over the whole text:

1. **Headers:** ``#`` to ``######`` followed by a space, one pass per level
   starting at level 1.  Leading indentation is dropped.
2. **Bold:** ``**text**`` becomes ``<strong>``.
3. **Italic:** ``*text*`` becomes ``<em>``.  Bold runs first so ``**x**``
   never reaches this pass.  An unmatched ``*`` is left alone.
4. **Inline code:** text between single backticks becomes ``<code>``.
5. **Links:** ``[label](url)`` becomes an anchor.
6. **Blockquotes:** one ``<blockquote>`` per ``> `` line; consecutive quote
   lines are not merged.
7. **List items:** lines starting with ``- `` or ``* `` become ``<li>``.
8. **Line breaks:** every remaining ``\n`` becomes ``<br>``.
9. **List wrapping:** each run of adjacent ``<li>`` elements, separated only
   by the ``<br>`` left from their own line breaks, is wrapped in a single
   ``<ul>``.  The separators inside the run are removed.

Order matters: later rules see the output of earlier ones.  Inline patterns
never cross a line break.

No HTML escaping is performed.  ``<``, ``>`` and ``&`` in the source are
emitted untouched and link targets are inserted verbatim; the input is treated
as a trusted local file.

Example
-------

>>> convert_markdown("**a** *b* `c`")
'<strong>a</strong> <em>b</em> <code>c</code>'
"""

from __future__ import annotations

import re

__all__ = ["SUBSTITUTIONS", "LIST_RUN_RX", "convert_markdown"]

# ---------------------------------------------------------------------------
# Substitution table
# ---------------------------------------------------------------------------

_HEADER_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(rf"^[ \t]*#{{{level}}} (.+)$", re.MULTILINE), rf"<h{level}>\1</h{level}>")
    for level in range(1, 7)
]

SUBSTITUTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    *_HEADER_RULES,
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"`(.+?)`"), r"<code>\1</code>"),
    (re.compile(r"\[(.+?)\]\((.+?)\)"), r'<a href="\2">\1</a>'),
    (re.compile(r"^> (.+)$", re.MULTILINE), r"<blockquote>\1</blockquote>"),
    (re.compile(r"^[-*] (.+)$", re.MULTILINE), r"<li>\1</li>"),
)

# A run of list items joined only by the breaks that separated their lines.
LIST_RUN_RX: re.Pattern[str] = re.compile(r"<li>.*?</li>(?:<br><li>.*?</li>)*")


def _wrap_list_run(match: re.Match[str]) -> str:
    items = match.group(0).replace("</li><br><li>", "</li><li>")
    return f"<ul>{items}</ul>"


def convert_markdown(markdown_text: str) -> str:
    r"""Return the HTML body fragment for ``markdown_text``.

    ``\r\n`` line endings are treated as ``\n``.  The function is total: any
    string, including the empty string, is accepted.
    """

    text = markdown_text.replace("\r\n", "\n")
    for pattern, replacement in SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    text = text.replace("\n", "<br>")
    return LIST_RUN_RX.sub(_wrap_list_run, text)
