"""
Line-by-line, word-by-word comparison of two texts.

Lines correspond by index and so do words within a line; nothing is
realigned when one side has an inserted or deleted line. Every function
here is pure and total over (str, str).
"""
import html
from typing import List

from compair.models.comparison_response import ComparisonResult, LinePair, WordPair

DEFAULT_HIGHLIGHT_CLASS = "changed"


def split_lines(text: str) -> List[str]:
    """
    Split on "\\n" only. Carriage returns stay attached to their line and a
    trailing newline leaves an empty final line, so "" gives [""].
    """
    return text.split("\n")


def split_words(line: str) -> List[str]:
    # runs of spaces yield empty tokens; they are not collapsed
    return line.split(" ")


def _at(items: List[str], index: int) -> str:
    return items[index] if index < len(items) else ""


def compare_words(line_a: str, line_b: str) -> List[WordPair]:
    """
    Pair the words of two lines by position. The shorter side is padded
    with empty strings, and a pair is changed when the words differ.
    """
    words_a = split_words(line_a)
    words_b = split_words(line_b)
    pairs = []
    for j in range(max(len(words_a), len(words_b))):
        word_a = _at(words_a, j)
        word_b = _at(words_b, j)
        pairs.append(WordPair(index=j, word_a=word_a, word_b=word_b, changed=word_a != word_b))
    return pairs


def render_words(words: List[str], changed: List[bool], highlight_class: str = DEFAULT_HIGHLIGHT_CLASS) -> str:
    # the stylesheet only styles .changed; a custom class needs matching CSS
    css_class = html.escape(highlight_class, quote=True)
    parts = []
    for word, is_changed in zip(words, changed):
        text = html.escape(word, quote=False)
        if is_changed:
            parts.append(f'<span class="{css_class}">{text}</span>')
        else:
            parts.append(text)
    # trailing empty words and a trailing \r must not leave whitespace behind
    return " ".join(parts).rstrip()


def highlight_differences(line: str, compare_line: str, highlight_class: str = DEFAULT_HIGHLIGHT_CLASS) -> str:
    """
    Render `line` with the words that differ from `compare_line` wrapped in
    a highlight span. Identical lines come back unmodified apart from HTML
    escaping.
    """
    if line == compare_line:
        return html.escape(line, quote=False)
    pairs = compare_words(line, compare_line)
    return render_words([p.word_a for p in pairs], [p.changed for p in pairs], highlight_class)


def compare_lines(index: int, line_a: str, line_b: str, highlight_class: str = DEFAULT_HIGHLIGHT_CLASS) -> LinePair:
    if line_a == line_b:
        rendered = html.escape(line_a, quote=False)
        return LinePair(
            index=index,
            line_number=index + 1,
            line_a=line_a,
            line_b=line_b,
            identical=True,
            words=[],
            rendered_a=rendered,
            rendered_b=rendered,
        )

    pairs = compare_words(line_a, line_b)
    flags = [p.changed for p in pairs]
    return LinePair(
        index=index,
        line_number=index + 1,
        line_a=line_a,
        line_b=line_b,
        identical=False,
        words=pairs,
        rendered_a=render_words([p.word_a for p in pairs], flags, highlight_class),
        rendered_b=render_words([p.word_b for p in pairs], flags, highlight_class),
    )


def compare(text_a: str, text_b: str, highlight_class: str = DEFAULT_HIGHLIGHT_CLASS) -> ComparisonResult:
    """
    Compare two texts line by line.

    Returns one LinePair per index up to the longer text's line count;
    lines missing on the shorter side are compared as empty strings.
    """
    lines_a = split_lines(text_a)
    lines_b = split_lines(text_b)

    lines = [
        compare_lines(i, _at(lines_a, i), _at(lines_b, i), highlight_class)
        for i in range(max(len(lines_a), len(lines_b)))
    ]
    return ComparisonResult(
        lines=lines,
        line_count=len(lines),
        changed_line_count=sum(1 for line in lines if not line.identical),
    )
