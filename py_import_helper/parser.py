"""Parser module for py-import-helper.

This module turns raw ``import X`` / ``from X import a, b`` strings into
:class:`~py_import_helper.types.ImportStatement` records and provides the
item ordering used everywhere in the package.
"""

from functools import cmp_to_key
import logging
from typing import Iterable
from typing import List
from typing import Optional

from py_import_helper.types import ImportCategory
from py_import_helper.types import ImportKind
from py_import_helper.types import ImportStatement

LOG = logging.getLogger(__name__)

_FROM = "from "
_IMPORT = "import "
_SEPARATOR = " import "


def extract_package(import_statement: str) -> str:
    """Return the module an import statement refers to.

    >>> extract_package("from collections.abc import Mapping")
    'collections.abc'
    >>> extract_package("import json")
    'json'

    Anything that is not one of the two recognised forms is returned whole.
    """
    if import_statement.startswith(_FROM):
        from_part = import_statement[len(_FROM):]
        package, sep, _ = from_part.partition(_SEPARATOR)
        if sep and package.strip():
            return package.strip()
    elif import_statement.startswith(_IMPORT):
        tokens = import_statement[len(_IMPORT):].split()
        if tokens:
            return tokens[0]
    return import_statement


def extract_items(import_statement: str) -> List[str]:
    """Return the sorted, de-duplicated names bound by a from-import.

    Parentheses and commas are treated as whitespace, so the parenthesized
    multi-line form is accepted as well.
    """
    if not import_statement.startswith(_FROM):
        return []
    _, sep, items_part = import_statement[len(_FROM):].partition(_SEPARATOR)
    if not sep:
        return []
    for noise in "(),":
        items_part = items_part.replace(noise, " ")
    return sort_items(set(items_part.split()))


def is_all_caps(name: str) -> bool:
    """Whether every alphabetic character of ``name`` is upper case.

    Non-alphabetic characters are ignored, so ``TYPE_CHECKING`` and ``_X1``
    count as all-caps while ``_private`` does not.
    """
    return bool(name) and all(c.isupper() for c in name if c.isalpha())


def custom_import_sort(a: str, b: str) -> int:
    """Compare two imported names, ``cmp`` style.

    A wildcard sorts last. ALL_CAPS names sort before the rest; within each
    group names compare case-insensitively, with a case-sensitive tiebreak.
    """
    if a == "*" or b == "*":
        return (a == "*") - (b == "*")

    a_caps, b_caps = is_all_caps(a), is_all_caps(b)
    if a_caps != b_caps:
        return -1 if a_caps else 1

    a_key, b_key = (a.lower(), a), (b.lower(), b)
    return (a_key > b_key) - (a_key < b_key)


import_sort_key = cmp_to_key(custom_import_sort)


def sort_items(items: Iterable[str]) -> List[str]:
    """Return ``items`` ordered by :func:`custom_import_sort`."""
    return sorted(items, key=import_sort_key)


def parse_import(import_statement: str,
                 category: ImportCategory = ImportCategory.THIRD_PARTY) -> Optional[ImportStatement]:
    """Parse a raw statement into an :class:`ImportStatement`.

    Returns None for empty or whitespace-only input. Unrecognised text is
    kept verbatim as a direct statement.
    """
    trimmed = import_statement.strip()
    if not trimmed:
        LOG.debug("Ignoring empty import statement")
        return None

    import_type = ImportKind.FROM if trimmed.startswith(_FROM) else ImportKind.DIRECT
    package = extract_package(trimmed)

    if import_type is ImportKind.FROM:
        items = extract_items(trimmed)
    elif trimmed.startswith(_IMPORT):
        items = [package]
    else:
        items = []

    if import_type is ImportKind.FROM and items:
        statement = f"from {package} import {', '.join(items)}"
    else:
        statement = trimmed

    return ImportStatement(
        statement=statement,
        category=category,
        import_type=import_type,
        package=package,
        items=items,
        is_multiline="(" in trimmed or ")" in trimmed,
    )
