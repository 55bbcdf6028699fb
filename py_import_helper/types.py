"""Type definitions for py-import-helper.

This module defines the import categories and kinds, the parsed statement
record, the structured import specification and the formatting settings
shared by the rest of the package.
"""
from __future__ import annotations
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
import enum
from typing import Iterable
from typing import List
from typing import NamedTuple
from typing import Optional


class ImportCategory(enum.IntEnum):
    """PEP 8 import groups, in emission order."""

    FUTURE = 0
    STANDARD_LIBRARY = 1
    THIRD_PARTY = 2
    LOCAL = 3


class ImportKind(enum.Enum):
    """Surface form of an import statement."""

    DIRECT = "import"
    FROM = "from"


ImportType = ImportKind


@dataclass
class ImportStatement:
    """A single parsed import statement.

    ``statement`` is the canonical text. For from-imports it is always
    rebuilt from ``package`` and the sorted ``items``.
    """

    statement: str
    category: ImportCategory
    import_type: ImportKind
    package: str
    items: List[str] = field(default_factory=list)
    is_multiline: bool = False

    @property
    def is_from(self) -> bool:
        return self.import_type is ImportKind.FROM


@dataclass
class ImportSpec:
    """Structured description of an import.

    ``items=None`` or an empty list produces ``import <package>``; any items
    produce ``from <package> import ...``.
    """

    package: str
    items: Optional[List[str]] = None
    type_checking: bool = False

    def __post_init__(self) -> None:
        if not self.package or not self.package.strip():
            raise ValueError("ImportSpec requires a package name")
        if self.items is not None:
            self.items = list(self.items)

    @classmethod
    def direct(cls, package: str) -> "ImportSpec":
        return cls(package)

    @classmethod
    def from_items(cls, package: str, items: Iterable[str]) -> "ImportSpec":
        return cls(package, list(items))

    @classmethod
    def type_checking_direct(cls, package: str) -> "ImportSpec":
        return cls(package, type_checking=True)

    @classmethod
    def type_checking_from(cls, package: str, items: Iterable[str]) -> "ImportSpec":
        return cls(package, list(items), type_checking=True)

    def as_type_checking(self) -> "ImportSpec":
        return replace(self, type_checking=True)

    def to_statement(self) -> str:
        """Render the specification as an import statement string."""
        if self.items:
            return f"from {self.package} import {', '.join(self.items)}"
        return f"import {self.package}"


@dataclass(frozen=True)
class FormattingConfig:
    """Layout settings for merged from-imports (isort/ruff compatible).

    Attributes:
        line_length: Maximum length of a single-line from-import.
        indent_size: Spaces before each item of a multi-line import.
        use_trailing_comma: Append a comma to the last item of a multi-line import.
        force_single_line: Always use the single-line form.
        force_multiline: Always use the parenthesized form.
        multiline_threshold: Item count at which the parenthesized form is used.
    """

    line_length: int = 79
    indent_size: int = 4
    use_trailing_comma: bool = True
    force_single_line: bool = False
    force_multiline: bool = False
    multiline_threshold: int = 4

    def __post_init__(self) -> None:
        if self.force_single_line and self.force_multiline:
            raise ValueError("force_single_line and force_multiline are mutually exclusive")

    @classmethod
    def pep8_compatible(cls) -> "FormattingConfig":
        return cls()

    @classmethod
    def isort_compatible(cls) -> "FormattingConfig":
        return cls()

    @classmethod
    def black_compatible(cls) -> "FormattingConfig":
        return cls(line_length=88)

    @classmethod
    def ruff_compatible(cls) -> "FormattingConfig":
        return cls(line_length=88)

    @classmethod
    def from_profile(cls, name: str) -> "FormattingConfig":
        """Return the preset for a profile name ('pep8', 'isort', 'black' or 'ruff')."""
        profiles = {
            "pep8": cls.pep8_compatible,
            "isort": cls.isort_compatible,
            "black": cls.black_compatible,
            "ruff": cls.ruff_compatible,
        }
        try:
            return profiles[name.strip().lower()]()
        except KeyError:
            raise ValueError(f"Unknown formatting profile: {name!r}") from None

    @property
    def indent(self) -> str:
        return " " * self.indent_size


class CategorizedImports(NamedTuple):
    """Formatted lines of one scope, split by category."""

    future: List[str]
    stdlib: List[str]
    third_party: List[str]
    local: List[str]


class AllCategorizedImports(NamedTuple):
    """Formatted lines of both scopes, split by category."""

    future: List[str]
    stdlib: List[str]
    third_party: List[str]
    local: List[str]
    type_checking_future: List[str]
    type_checking_stdlib: List[str]
    type_checking_third_party: List[str]
    type_checking_local: List[str]
