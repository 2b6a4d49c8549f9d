"""
Emission buffer used by generator backends.

One CodeWriter is owned by one export run; backends append lines to it
while tracking indentation and read the final text once at the end.
"""

from typing import List


class CodeWriter:
    """Line-oriented text builder with indentation tracking."""

    def __init__(self, indentation: str = "  ", line_ending: str = "\n"):
        self.indentation = indentation
        self.line_ending = line_ending
        self._lines: List[str] = []
        self._level = 0

    @property
    def level(self) -> int:
        return self._level

    def line(self, text: str = "") -> "CodeWriter":
        """Append one line at the current indentation (blank lines stay empty)."""
        if text:
            self._lines.append(self.indentation * self._level + text)
        else:
            self._lines.append("")
        return self

    def lines(self, text: str) -> "CodeWriter":
        """Append a multi-line block, indenting every line."""
        for part in text.split("\n"):
            self.line(part.rstrip())
        return self

    def blank(self) -> "CodeWriter":
        """Append a blank line unless the buffer is empty or already ends blank."""
        if self._lines and self._lines[-1] != "":
            self._lines.append("")
        return self

    def indent(self) -> "CodeWriter":
        self._level += 1
        return self

    def dedent(self) -> "CodeWriter":
        if self._level == 0:
            raise ValueError("Cannot dedent below zero")
        self._level -= 1
        return self

    def is_empty(self) -> bool:
        return not self._lines

    def build(self) -> str:
        """Join all lines, terminating the text with one line ending."""
        if not self._lines:
            return ""
        return self.line_ending.join(self._lines) + self.line_ending
