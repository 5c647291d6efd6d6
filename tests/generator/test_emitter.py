"""Tests for test method emission."""

import pytest

from boxgen.generator.emitter import TestMethodEmitter, escape_string_characters
from boxgen.generator.printer import Printer


class TestEscapeStringCharacters:
    """Test cases for Java string escaping."""

    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("compiler/testData/codegen/Foo.kt", "compiler/testData/codegen/Foo.kt"),
            ("C:\\data\\Foo.kt", "C:\\\\data\\\\Foo.kt"),
            ('a"b', 'a\\"b'),
            ("a\tb\nc\rd\be\ff", "a\\tb\\nc\\rd\\be\\ff"),
            ("a\x01b", "a\\u0001b"),
            ("caf\u00e9", "caf\u00e9"),
            ("it's", "it's"),
        ],
    )
    def test_escaping(self, raw: str, escaped: str) -> None:
        assert escape_string_characters(raw) == escaped

    def test_outside_bmp_non_printable_uses_surrogates(self) -> None:
        assert escape_string_characters("\U000e0001") == "\\udb40\\udc01"


class TestTestMethodEmitter:
    """Test cases for TestMethodEmitter."""

    def test_method_shape(self) -> None:
        p = Printer()

        TestMethodEmitter().emit(p, "Foo", "compiler/testData/codegen/Foo.kt")

        assert p.getvalue() == (
            "public void testFoo() throws Exception {\n"
            '    invokeBoxMethod("compiler/testData/codegen/Foo.kt");\n'
            "}\n"
            "\n"
        )

    def test_respects_current_indent(self) -> None:
        p = Printer().push_indent()

        TestMethodEmitter().emit(p, "Foo_0", "a.kt")

        assert p.getvalue().splitlines() == [
            "    public void testFoo_0() throws Exception {",
            '        invokeBoxMethod("a.kt");',
            "    }",
            "",
        ]

    def test_counts_emitted_methods(self) -> None:
        emitter = TestMethodEmitter()
        p = Printer()
        emitter.emit(p, "A", "a.kt")
        emitter.emit(p, "B", "b.kt")

        assert emitter.emitted_count == 2
