#!/usr/bin/env python3
"""Core utilities for py-import-helper. This module
provides the ImportHelper class, which collects import statements, sorts them
into PEP 8 groups, merges imports from the same package and formats the
result. Imports that are only needed by type checkers are kept in a separate
TYPE_CHECKING block.
"""
from __future__ import annotations
import logging
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional
from typing import Set

from py_import_helper.formatting import format_category
from py_import_helper.formatting import format_sections
from py_import_helper.parser import parse_import
from py_import_helper.parser import sort_items
from py_import_helper.registry import PackageRegistry
from py_import_helper.rules import categorize_import
from py_import_helper.sections import ImportSections
from py_import_helper.sections import Scope
from py_import_helper.sections import Section
from py_import_helper.types import AllCategorizedImports
from py_import_helper.types import CategorizedImports
from py_import_helper.types import FormattingConfig
from py_import_helper.types import ImportCategory
from py_import_helper.types import ImportKind
from py_import_helper.types import ImportSpec
from py_import_helper.types import ImportStatement

LOG = logging.getLogger(__name__)

TYPE_CHECKING_MODULE = "typing"
TYPE_CHECKING_MARKER = "TYPE_CHECKING"

_DATETIME_TYPES = ("datetime", "date", "time", "timedelta")
_TYPING_NAMES = ("Any", "Generic", "TypeVar", "Protocol")


class ImportHelper:
    """Collects, categorizes and formats Python imports.

    Example::

        helper = ImportHelper.with_package_name("myapp")
        helper.add_import_string("from typing import Any")
        helper.add_import_string("from pydantic import BaseModel")
        helper.add_import_string("from myapp.models import User")
        helper.get_formatted()

    The helper owns its registry, local prefixes and categorization cache.
    Registry changes do not reach packages that were already categorized
    until :meth:`clear_cache` is called.
    """

    def __init__(self, package_name: Optional[str] = None,
                 registry: Optional[PackageRegistry] = None,
                 formatting: Optional[FormattingConfig] = None) -> None:
        self._sections = ImportSections()
        self._category_cache: Dict[str, ImportCategory] = {}
        self._package_name = package_name
        self._local_package_prefixes: Set[str] = set()
        self._registry = registry if registry is not None else PackageRegistry()
        self.formatting = formatting

    @classmethod
    def with_package_name(cls, package_name: str, **kwargs) -> "ImportHelper":
        """Create a helper that treats ``package_name`` as local."""
        helper = cls(package_name=package_name, **kwargs)
        helper.add_local_package_prefix(package_name)
        return helper

    # -- configuration ---------------------------------------------------

    @property
    def registry(self) -> PackageRegistry:
        return self._registry

    @property
    def package_name(self) -> Optional[str]:
        return self._package_name

    @property
    def local_package_prefixes(self) -> Set[str]:
        return set(self._local_package_prefixes)

    @property
    def sections(self) -> ImportSections:
        return self._sections

    def clear_cache(self) -> "ImportHelper":
        """Forget cached registry lookups, e.g. after editing the registry."""
        self._category_cache.clear()
        return self

    def add_local_package_prefix(self, prefix: str) -> "ImportHelper":
        self._local_package_prefixes.add(prefix)
        return self

    def add_local_package_prefixes(self, prefixes: Iterable[str]) -> "ImportHelper":
        for prefix in prefixes:
            self.add_local_package_prefix(prefix)
        return self

    # -- collection ------------------------------------------------------

    def _parse_import(self, import_statement: str) -> Optional[ImportStatement]:
        trimmed = import_statement.strip()
        if not trimmed:
            LOG.debug("Skipping empty import statement")
            return None
        category = categorize_import(
            trimmed,
            self._registry,
            self._local_package_prefixes,
            self._package_name,
            self._category_cache,
        )
        statement = parse_import(trimmed, category)
        LOG.debug(f"Parsed '{trimmed}' as {category.name} ({statement.import_type.value})")
        return statement

    def _add(self, import_statement: str, scope: Scope) -> Optional[ImportStatement]:
        statement = self._parse_import(import_statement)
        if statement is not None:
            self._sections.append(scope, statement)
        return statement

    def add_import_string(self, import_statement: str) -> None:
        """Add a raw ``import X`` or ``from X import a, b`` statement."""
        self._add(import_statement, Scope.REGULAR)

    def add_import_strings(self, import_statements: Iterable[str]) -> None:
        for import_statement in import_statements:
            self.add_import_string(import_statement)

    def add_from_import(self, package: str, items: Iterable[str]) -> None:
        self.add_import_string(f"from {package} import {', '.join(items)}")

    def add_direct_import(self, module: str) -> None:
        self.add_import_string(f"import {module}")

    def add_type_checking_import(self, import_statement: str) -> None:
        """Add a statement to the TYPE_CHECKING block.

        The regular block is given ``from typing import TYPE_CHECKING``.
        """
        if self._add(import_statement, Scope.TYPE_CHECKING) is not None:
            self._ensure_type_checking_import()

    def add_type_checking_from_import(self, package: str, items: Iterable[str]) -> None:
        self.add_type_checking_import(f"from {package} import {', '.join(items)}")

    def add_type_checking_direct_import(self, module: str) -> None:
        self.add_type_checking_import(f"import {module}")

    def add_import(self, spec: ImportSpec) -> None:
        """Add an import described by an :class:`ImportSpec`."""
        if spec.type_checking:
            self.add_type_checking_import(spec.to_statement())
        else:
            self.add_import_string(spec.to_statement())

    def add_imports(self, specs: Iterable[ImportSpec]) -> None:
        for spec in specs:
            self.add_import(spec)

    def _ensure_type_checking_import(self) -> None:
        stdlib_from = self._sections.bucket(Scope.REGULAR, Section.STANDARD_LIBRARY_FROM)
        typing_imports = [s for s in stdlib_from if s.package == TYPE_CHECKING_MODULE]
        if any(TYPE_CHECKING_MARKER in s.items for s in typing_imports):
            return

        if typing_imports:
            target = typing_imports[0]
            target.items = sort_items(target.items + [TYPE_CHECKING_MARKER])
            target.statement = f"from {TYPE_CHECKING_MODULE} import {', '.join(target.items)}"
            LOG.debug(f"Added {TYPE_CHECKING_MARKER} to '{target.statement}'")
            return

        stdlib_from.append(ImportStatement(
            statement=f"from {TYPE_CHECKING_MODULE} import {TYPE_CHECKING_MARKER}",
            category=ImportCategory.STANDARD_LIBRARY,
            import_type=ImportKind.FROM,
            package=TYPE_CHECKING_MODULE,
            items=[TYPE_CHECKING_MARKER],
        ))
        LOG.debug(f"Added 'from {TYPE_CHECKING_MODULE} import {TYPE_CHECKING_MARKER}'")

    # -- output ----------------------------------------------------------

    def _categorized(self, scope: Scope) -> CategorizedImports:
        return CategorizedImports(*(
            format_category(self._sections, scope, category, self.formatting)
            for category in ImportCategory
        ))

    def get_categorized(self) -> CategorizedImports:
        """Return the regular imports as ``(future, stdlib, third_party, local)``."""
        return self._categorized(Scope.REGULAR)

    def get_type_checking_categorized(self) -> CategorizedImports:
        return self._categorized(Scope.TYPE_CHECKING)

    def get_all_categorized(self) -> AllCategorizedImports:
        return AllCategorizedImports(*self.get_categorized(), *self.get_type_checking_categorized())

    def get_formatted(self) -> List[str]:
        """Return the regular import block, groups separated by empty strings."""
        return format_sections(self._sections, Scope.REGULAR, self.formatting)

    def get_type_checking_formatted(self) -> List[str]:
        return format_sections(self._sections, Scope.TYPE_CHECKING, self.formatting)

    def render(self, indent: str = "    ") -> str:
        """Return the full import block as source text.

        TYPE_CHECKING imports are placed in an ``if TYPE_CHECKING:`` block
        after the regular imports.
        """
        lines = self.get_formatted()
        type_checking = self.get_type_checking_formatted()
        if type_checking:
            if lines:
                lines.append("")
            lines.append(f"if {TYPE_CHECKING_MARKER}:")
            lines.extend(f"{indent}{line}" if line else "" for line in type_checking)
        return "\n".join(lines) + "\n" if lines else ""

    # -- state -----------------------------------------------------------

    def reset(self) -> "ImportHelper":
        """Drop all collected imports, keeping registry and prefixes."""
        self._sections.clear()
        return self

    clear = reset

    def is_empty(self) -> bool:
        return self._sections.is_empty(Scope.REGULAR)

    def is_type_checking_empty(self) -> bool:
        return self._sections.is_empty(Scope.TYPE_CHECKING)

    def count(self) -> int:
        return self._sections.count(Scope.REGULAR)

    def count_type_checking(self) -> int:
        return self._sections.count(Scope.TYPE_CHECKING)

    def clone_config(self) -> "ImportHelper":
        """Return a new, empty helper with a copy of this helper's configuration."""
        clone = type(self)(
            package_name=self._package_name,
            registry=self._registry.copy(),
            formatting=self.formatting,
        )
        clone._local_package_prefixes = set(self._local_package_prefixes)
        clone._category_cache = dict(self._category_cache)
        return clone

    # -- code generation helpers ------------------------------------------

    def create_model_imports(self, required_types: Iterable[str]) -> None:
        """Add the imports a generated pydantic model needs.

        Args:
            required_types: Type names or annotation strings used by the
                model fields, e.g. ``"datetime"``, ``"UUID"`` or
                ``"dict[str, Any]"``.
        """
        self.add_import_string("from pydantic import BaseModel, ConfigDict, Field")

        datetime_names: List[str] = []
        typing_names: Set[str] = set()
        abc_names: Set[str] = set()
        needs_decimal = False

        for type_name in required_types:
            if type_name in _DATETIME_TYPES:
                if type_name not in datetime_names:
                    datetime_names.append(type_name)
            elif type_name == "Decimal":
                needs_decimal = True
            elif type_name == "UUID":
                self.add_import_string("from uuid import UUID")
            else:
                typing_names.update(name for name in _TYPING_NAMES if name in type_name)
                if "Callable" in type_name:
                    abc_names.add("Callable")

        if datetime_names:
            self.add_from_import("datetime", datetime_names)
        if needs_decimal:
            self.add_import_string("from decimal import Decimal")
        if typing_names:
            self.add_from_import("typing", sorted(typing_names))
        if abc_names:
            self.add_from_import("collections.abc", sorted(abc_names))
