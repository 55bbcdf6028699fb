"""Rules module for py-import-helper.

This module decides which PEP 8 group an import statement belongs to:
``__future__`` imports, standard library, third-party or local.
"""
from __future__ import annotations
import logging
from typing import Iterable
from typing import MutableMapping
from typing import Optional

from py_import_helper.parser import extract_package
from py_import_helper.registry import PackageRegistry
from py_import_helper.types import ImportCategory

LOG = logging.getLogger(__name__)

_RELATIVE_MARKERS = ("from .", "from ..", "from ...", "from ....")


def is_future_import(import_statement: str) -> bool:
    return import_statement.startswith("from __future__")


def is_relative_import(import_statement: str) -> bool:
    """Whether the statement is an explicit relative import."""
    return any(marker in import_statement for marker in _RELATIVE_MARKERS)


def is_local_import(import_statement: str, local_prefixes: Iterable[str] = (),
                    package_name: Optional[str] = None) -> bool:
    """Whether the statement imports from the current project.

    Relative imports are always local. Otherwise the package is matched by
    prefix (not by exact name) against ``local_prefixes`` and ``package_name``.
    """
    if is_relative_import(import_statement):
        return True

    package = extract_package(import_statement)
    if any(package.startswith(prefix) for prefix in local_prefixes):
        return True
    return bool(package_name) and package.startswith(package_name)


def classify_package(package: str, registry: PackageRegistry) -> ImportCategory:
    """Classify a non-local package using the registry.

    The standard library wins when a name is registered in both sets; unknown
    packages are third-party.
    """
    if registry.is_stdlib(package):
        return ImportCategory.STANDARD_LIBRARY
    if registry.is_third_party(package):
        return ImportCategory.THIRD_PARTY
    return ImportCategory.THIRD_PARTY


def categorize_import(import_statement: str, registry: PackageRegistry,
                      local_prefixes: Iterable[str] = (),
                      package_name: Optional[str] = None,
                      cache: Optional[MutableMapping[str, ImportCategory]] = None) -> ImportCategory:
    """Return the category of a (trimmed) import statement.

    Args:
        import_statement: The statement text.
        registry: Known stdlib and third-party packages.
        local_prefixes: Package prefixes belonging to the current project.
        package_name: Name of the current project's package, if any.
        cache: Optional mapping of package name to registry category. Only
            registry lookups are stored; entries are never invalidated here.

    Returns:
        The :class:`ImportCategory` of the statement.
    """
    if is_future_import(import_statement):
        return ImportCategory.FUTURE

    if is_local_import(import_statement, local_prefixes, package_name):
        return ImportCategory.LOCAL

    package = extract_package(import_statement)
    if cache is not None and package in cache:
        LOG.debug(f"Category cache hit for '{package}'")
        return cache[package]

    category = classify_package(package, registry)
    if cache is not None:
        cache[package] = category
    return category
