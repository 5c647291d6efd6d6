"""Unique test method names derived from file names."""

import logging
import re

logger = logging.getLogger(__name__)

_NON_IDENTIFIER_CHARS = re.compile(r"[^0-9A-Za-z_$]")


def base_test_name(file_name: str) -> str:
    """Derive the undisambiguated test name for a file.

    Strips the last extension, replaces characters that cannot appear in a
    Java identifier with underscores and capitalizes the first letter.

    Examples:
        >>> base_test_name("foo.kt")
        'Foo'
        >>> base_test_name("kt-1234.kt")
        'Kt_1234'

    """
    stem, dot, _ = file_name.rpartition(".")
    if not dot or not stem:
        stem = file_name
    stem = _NON_IDENTIFIER_CHARS.sub("_", stem)
    return stem[:1].upper() + stem[1:]


class NameAllocator:
    """Append-only registry guaranteeing unique test names for one run.

    Names are compared case-sensitively. On collision ``_<n>`` is appended,
    with n counting up from 0 until the candidate is unused. Given the same
    sequence of file names the same names come out.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._taken: set[str] = set()

    @property
    def names(self) -> list[str]:
        """Allocated names in allocation order."""
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._taken

    def allocate(self, file_name: str) -> str:
        base = base_test_name(file_name)
        result = base
        i = 0
        while result in self._taken:
            result = f"{base}_{i}"
            i += 1
        if result != base:
            logger.debug("Test name %s already taken, using %s", base, result)
        self._names.append(result)
        self._taken.add(result)
        return result
