"""Indenting text accumulator used to build the generated source."""

DEFAULT_INDENT = "    "


class Printer:
    """Accumulates lines of generated code with a current indentation.

    Indentation is written at the start of each non-empty line; blank lines
    stay empty.
    """

    def __init__(self, indent_unit: str = DEFAULT_INDENT) -> None:
        self._parts: list[str] = []
        self._indent_unit = indent_unit
        self._level = 0
        self._at_line_start = True

    @property
    def indent(self) -> str:
        return self._indent_unit * self._level

    def print(self, *objects: object) -> "Printer":
        """Append text without a line break. Embedded newlines are kept as is."""
        text = "".join(str(o) for o in objects)
        if not text:
            return self
        if self._at_line_start:
            self._parts.append(self.indent)
        self._parts.append(text)
        self._at_line_start = text.endswith("\n")
        return self

    def println(self, *objects: object) -> "Printer":
        self.print(*objects)
        self._parts.append("\n")
        self._at_line_start = True
        return self

    def push_indent(self) -> "Printer":
        self._level += 1
        return self

    def pop_indent(self) -> "Printer":
        if self._level == 0:
            raise ValueError("Indentation is already at top level")
        self._level -= 1
        return self

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()
