"""Merging and layout of collected imports.

Statements are grouped by package, from-imports of one package are merged
into a single statement and laid out on one line or in the parenthesized
multi-line form.
"""
from __future__ import annotations
from collections import defaultdict
import logging
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional
from typing import Sequence

from py_import_helper.parser import sort_items
from py_import_helper.sections import CATEGORY_SECTIONS
from py_import_helper.sections import ImportSections
from py_import_helper.sections import Scope
from py_import_helper.types import FormattingConfig
from py_import_helper.types import ImportCategory
from py_import_helper.types import ImportStatement

LOG = logging.getLogger(__name__)

MAX_SINGLE_LINE_ITEMS = 3
MAX_SINGLE_LINE_ITEMS_LENGTH = 60
DEFAULT_INDENT = "    "


def _fits_single_line(package: str, items: Sequence[str], config: Optional[FormattingConfig]) -> bool:
    items_length = sum(len(item) for item in items)
    if config is None:
        return len(items) <= MAX_SINGLE_LINE_ITEMS and items_length < MAX_SINGLE_LINE_ITEMS_LENGTH
    if config.force_single_line:
        return True
    if config.force_multiline:
        return False
    line = f"from {package} import {', '.join(items)}"
    return (len(items) < config.multiline_threshold
            and items_length < MAX_SINGLE_LINE_ITEMS_LENGTH
            and len(line) <= config.line_length)


def format_from_import(package: str, items: Sequence[str],
                       config: Optional[FormattingConfig] = None) -> List[str]:
    """Lay out ``from <package> import <items>``.

    ``items`` must already be sorted. Without ``config`` at most three items
    whose names total under 60 characters stay on one line.
    """
    if _fits_single_line(package, items, config):
        return [f"from {package} import {', '.join(items)}"]

    indent = DEFAULT_INDENT if config is None else config.indent
    trailing_comma = True if config is None else config.use_trailing_comma
    lines = [f"from {package} import ("]
    for position, item in enumerate(items, 1):
        comma = "," if position < len(items) or trailing_comma else ""
        lines.append(f"{indent}{item}{comma}")
    lines.append(")")
    return lines


def merge_package_imports(imports: Sequence[ImportStatement],
                          config: Optional[FormattingConfig] = None) -> List[str]:
    """Merge the from-imports of a single package.

    Items are collected from every statement, duplicates collapse, and the
    result is sorted and laid out. Statements without items are emitted
    as they are.
    """
    package = imports[0].package
    all_items = set()
    for statement in imports:
        all_items.update(statement.items)

    if not all_items:
        return sorted({statement.statement for statement in imports})

    return format_from_import(package, sort_items(all_items), config)


def _format_package_group(imports: Sequence[ImportStatement],
                          config: Optional[FormattingConfig]) -> List[str]:
    if len(imports) == 1 and not imports[0].items:
        return [imports[0].statement]

    direct = [statement for statement in imports if not statement.is_from]
    from_imports = [statement for statement in imports if statement.is_from]

    # direct imports are never folded into "from X import X"
    lines = sorted({statement.statement for statement in direct})
    if from_imports:
        lines.extend(merge_package_imports(from_imports, config))
    return lines


def format_imports(imports: Iterable[ImportStatement],
                   config: Optional[FormattingConfig] = None) -> List[str]:
    """Format the statements of one bucket.

    Packages are emitted in code point order; statements of the same package
    are merged.
    """
    package_imports: Dict[str, List[ImportStatement]] = defaultdict(list)
    for statement in imports:
        package_imports[statement.package].append(statement)

    result: List[str] = []
    for package in sorted(package_imports):
        result.extend(_format_package_group(package_imports[package], config))
    return result


def format_category(sections: ImportSections, scope: Scope, category: ImportCategory,
                    config: Optional[FormattingConfig] = None) -> List[str]:
    """Return the lines of one category: direct imports, then from-imports."""
    lines: List[str] = []
    for section in CATEGORY_SECTIONS[category]:
        statements = sections.bucket(scope, section)
        if statements:
            lines.extend(format_imports(statements, config))
    return lines


def format_sections(sections: ImportSections, scope: Scope = Scope.REGULAR,
                    config: Optional[FormattingConfig] = None) -> List[str]:
    """Return the whole block of a scope with one blank line between groups.

    The result never starts or ends with a blank line and is empty when the
    scope holds no imports.
    """
    if not isinstance(scope, Scope):
        raise ValueError(f"Unsupported import scope: {scope!r}")

    result: List[str] = []
    for category in ImportCategory:
        lines = format_category(sections, scope, category, config)
        if not lines:
            continue
        if result:
            result.append("")
        result.extend(lines)

    LOG.debug(f"Formatted {sections.count(scope)} {scope.value} imports into {len(result)} lines")
    return result
