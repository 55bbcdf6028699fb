"""Top-level package for py-import-helper.

This package exposes the API for collecting Python import statements and
organizing them into PEP 8 groups.
"""

from py_import_helper.core import ImportHelper
from py_import_helper.formatting import format_imports
from py_import_helper.formatting import format_sections
from py_import_helper.formatting import merge_package_imports
from py_import_helper.parser import custom_import_sort
from py_import_helper.parser import extract_items
from py_import_helper.parser import extract_package
from py_import_helper.parser import parse_import
from py_import_helper.parser import sort_items
from py_import_helper.registry import COMMON_THIRD_PARTY_PACKAGES
from py_import_helper.registry import PackageRegistry
from py_import_helper.registry import PYTHON_STDLIB_MODULES
from py_import_helper.rules import categorize_import
from py_import_helper.rules import is_local_import
from py_import_helper.sections import ImportSections
from py_import_helper.sections import Scope
from py_import_helper.types import AllCategorizedImports
from py_import_helper.types import CategorizedImports
from py_import_helper.types import FormattingConfig
from py_import_helper.types import ImportCategory
from py_import_helper.types import ImportKind
from py_import_helper.types import ImportSpec
from py_import_helper.types import ImportStatement
from py_import_helper.types import ImportType


__all__ = [
    "ImportHelper",
    "PackageRegistry",
    "ImportCategory",
    "ImportKind",
    "ImportType",
    "ImportStatement",
    "ImportSpec",
    "FormattingConfig",
    "CategorizedImports",
    "AllCategorizedImports",
    "ImportSections",
    "Scope",
    "PYTHON_STDLIB_MODULES",
    "COMMON_THIRD_PARTY_PACKAGES",
    "parse_import",
    "extract_package",
    "extract_items",
    "custom_import_sort",
    "sort_items",
    "categorize_import",
    "is_local_import",
    "format_imports",
    "merge_package_imports",
    "format_sections",
]
