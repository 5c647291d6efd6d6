"""Package declaration rewriting for test data sources.

Every compiled test case is moved into its own package, named after its
path, so files that declare the same top-level symbols (or share a base
name) do not overwrite each other's class files.

A declaration is a line that starts, after optional indentation, with
``package <name>``. When a file holds several such lines (for example inside
a multi-line string) all of them are rewritten.
"""

import re
from pathlib import Path, PurePath

_NON_IDENTIFIER_CHARS = re.compile(r"[^0-9A-Za-z_]")

PACKAGE_DECLARATION = re.compile(r"^(?P<indent>[ \t]*)package[ \t]+[^\r\n]*", re.MULTILINE)


def namespace_token(path: PurePath | str) -> str:
    """Derive a package name from a file path.

    Path separators, hyphens, dots and any other character that cannot
    appear in an identifier become underscores, so two files with the same
    base name in different directories get different tokens.

    Examples:
        >>> namespace_token("compiler/testData/codegen/box/foo-bar.kt")
        'compiler_testData_codegen_box_foo_bar_kt'

    """
    return _NON_IDENTIFIER_CHARS.sub("_", str(path))


def has_package_declaration(text: str) -> bool:
    return PACKAGE_DECLARATION.search(text) is not None


def rewrite_package(token: str, text: str) -> str:
    """Point the package declaration of text at token.

    Existing declarations are replaced in place, keeping their indentation;
    the rest of the text is untouched. Without a declaration a single
    ``package <token>`` line is prepended. Rewriting twice with the same
    token is a no-op.
    """
    if has_package_declaration(text):
        return PACKAGE_DECLARATION.sub(lambda m: f"{m.group('indent')}package {token}", text)
    return f"package {token}\n{text}"


def rewrite_for_path(path: Path, text: str) -> tuple[str, str]:
    """Rewrite text into the package derived from path.

    Returns:
        Tuple of (namespace_token, rewritten_text).

    """
    token = namespace_token(path)
    return token, rewrite_package(token, text)
