"""Tests for unique test name allocation."""

import pytest

from boxgen.discovery.naming import NameAllocator, base_test_name


class TestBaseTestName:
    """Test cases for base_test_name."""

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("foo.kt", "Foo"),
            ("Foo.kt", "Foo"),
            ("kt1234.kt", "Kt1234"),
            ("kt-1234.kt", "Kt_1234"),
            ("a.b.kt", "A_b"),
            ("noExtension", "NoExtension"),
            ("1st.kt", "1st"),
        ],
    )
    def test_derivation(self, file_name: str, expected: str) -> None:
        assert base_test_name(file_name) == expected


class TestNameAllocator:
    """Test cases for NameAllocator."""

    def test_first_allocation_is_plain(self) -> None:
        allocator = NameAllocator()
        assert allocator.allocate("Foo.kt") == "Foo"

    def test_collision_appends_counter(self) -> None:
        allocator = NameAllocator()

        names = [allocator.allocate("Foo.kt") for _ in range(4)]

        assert names == ["Foo", "Foo_0", "Foo_1", "Foo_2"]

    def test_collision_after_capitalization(self) -> None:
        """foo.kt and Foo.kt both derive Foo."""
        allocator = NameAllocator()
        assert allocator.allocate("foo.kt") == "Foo"
        assert allocator.allocate("Foo.kt") == "Foo_0"

    def test_comparison_is_case_sensitive(self) -> None:
        allocator = NameAllocator()
        assert allocator.allocate("fooBar.kt") == "FooBar"
        assert allocator.allocate("foobar.kt") == "Foobar"

    def test_skips_names_taken_by_other_files(self) -> None:
        """A real file named Foo_0 forces the next Foo collision further."""
        allocator = NameAllocator()
        allocator.allocate("Foo.kt")
        allocator.allocate("Foo_0.kt")

        assert allocator.allocate("Foo.kt") == "Foo_1"

    def test_all_names_pairwise_distinct(self) -> None:
        allocator = NameAllocator()
        file_names = ["a.kt", "A.kt", "a.kt", "a_0.kt", "b.kt", "a.kt", "B.kt"]

        names = [allocator.allocate(n) for n in file_names]

        assert len(set(names)) == len(names)

    def test_registry_keeps_allocation_order(self) -> None:
        allocator = NameAllocator()
        for n in ["b.kt", "a.kt", "b.kt"]:
            allocator.allocate(n)

        assert allocator.names == ["B", "A", "B_0"]
        assert len(allocator) == 3
        assert "A" in allocator
        assert "C" not in allocator

    def test_names_returns_copy(self) -> None:
        allocator = NameAllocator()
        allocator.allocate("a.kt")
        allocator.names.append("Injected")

        assert allocator.names == ["A"]

    def test_deterministic_for_same_sequence(self) -> None:
        sequence = ["x.kt", "x.kt", "y.kt", "x.kt"]
        first = NameAllocator()
        second = NameAllocator()

        assert [first.allocate(n) for n in sequence] == [second.allocate(n) for n in sequence]
