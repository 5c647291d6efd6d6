"""Emission of generated test methods."""

from boxgen.generator.printer import Printer

HARNESS_METHOD = "invokeBoxMethod"

_SIMPLE_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    "\\": "\\\\",
    '"': '\\"',
}


def escape_string_characters(value: str) -> str:
    """Escape value for use inside a Java string literal.

    Control and other non-printable characters are written as ``\\uXXXX``
    (as a surrogate pair outside the BMP).
    """
    out: list[str] = []
    for ch in value:
        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            encoded = ch.encode("utf-16-be")
            for i in range(0, len(encoded), 2):
                out.append(f"\\u{int.from_bytes(encoded[i:i + 2], 'big'):04x}")
    return "".join(out)


class TestMethodEmitter:
    """Appends one fixed-shape test method per compiled test case."""

    __test__ = False  # not a pytest test class

    def __init__(self, harness_method: str = HARNESS_METHOD) -> None:
        self.harness_method = harness_method
        self.emitted_count = 0

    def emit(self, printer: Printer, test_name: str, file_path_literal: str) -> None:
        """Append ``public void test<test_name>()`` invoking the harness.

        Args:
            printer: Buffer of the generated class body.
            test_name: Unique identifier fragment from NameAllocator.
            file_path_literal: Already escaped path of the test data file.

        """
        printer.println("public void test", test_name, "() throws Exception {")
        printer.push_indent()
        printer.println(self.harness_method, '("', file_path_literal, '");')
        printer.pop_indent()
        printer.println("}")
        printer.println()
        self.emitted_count += 1
