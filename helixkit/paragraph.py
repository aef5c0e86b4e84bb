"""Wrap a paragraph of text into indented lines of limited width."""

from __future__ import annotations

from helixkit.strings import split


class _Line:
    """Words collected for one output line."""

    def __init__(self) -> None:
        self._words: list[str] = []
        self._word_length = 0

    def __bool__(self) -> bool:
        return bool(self._words)

    @property
    def length(self) -> int:
        # Words plus one space between each pair.
        return self._word_length + len(self._words) - 1

    def predict_length(self, word: str) -> int:
        return self.length + len(word) + 1

    def add(self, word: str) -> None:
        self._words.append(word)
        self._word_length += len(word)

    def text(self) -> str:
        return " ".join(self._words)

    def reset(self) -> None:
        self._words.clear()
        self._word_length = 0


def format_paragraph(
    paragraph: str,
    indent_spaces_count: int,
    max_line_spaces_count: int,
) -> list[str]:
    """Break ``paragraph`` on spaces into lines no wider than the maximum.

    Every line but the last is prefixed with the indentation. A word ending in
    a newline closes its line. The last line is not indented, and a paragraph
    that ends with a line break yields a final empty line.
    """
    if indent_spaces_count > max_line_spaces_count:
        raise ValueError("Requested more indentation than width.")

    permitted = max_line_spaces_count - indent_spaces_count
    indent = " " * indent_spaces_count
    words = split(paragraph, " ")
    lines: list[str] = []
    line = _Line()
    position = 0

    while position < len(words):
        word = words[position]
        ends_paragraph = word.endswith("\n")

        if line.predict_length(word) > permitted:
            if not line:
                raise ValueError(
                    f"Word of length {len(word)} cannot fit in a line of "
                    f"{permitted} characters."
                )
            lines.append(indent + line.text())
            line.reset()
            continue

        line.add(word)
        position += 1

        if ends_paragraph:
            lines.append(indent + line.text())
            line.reset()

    if not line or line.length > 0:
        lines.append(line.text())

    return lines