"""Storage for collected imports, bucketed by scope, category and kind."""
from __future__ import annotations
import enum
from typing import Dict
from typing import List
from typing import Tuple

from py_import_helper.types import ImportCategory
from py_import_helper.types import ImportKind
from py_import_helper.types import ImportStatement


class Scope(enum.Enum):
    """Where an import is emitted: at runtime or inside ``if TYPE_CHECKING:``."""

    REGULAR = "regular"
    TYPE_CHECKING = "type_checking"


class Section(enum.IntEnum):
    """The seven buckets of a scope, in emission order."""

    FUTURE = 0
    STANDARD_LIBRARY_DIRECT = 1
    STANDARD_LIBRARY_FROM = 2
    THIRD_PARTY_DIRECT = 3
    THIRD_PARTY_FROM = 4
    LOCAL_DIRECT = 5
    LOCAL_FROM = 6


CATEGORY_SECTIONS: Dict[ImportCategory, Tuple[Section, ...]] = {
    ImportCategory.FUTURE: (Section.FUTURE,),
    ImportCategory.STANDARD_LIBRARY: (Section.STANDARD_LIBRARY_DIRECT, Section.STANDARD_LIBRARY_FROM),
    ImportCategory.THIRD_PARTY: (Section.THIRD_PARTY_DIRECT, Section.THIRD_PARTY_FROM),
    ImportCategory.LOCAL: (Section.LOCAL_DIRECT, Section.LOCAL_FROM),
}


def section_for(category: ImportCategory, import_type: ImportKind) -> Section:
    """Return the bucket a statement of this category and kind goes into."""
    if category is ImportCategory.FUTURE:
        return Section.FUTURE
    direct, from_ = CATEGORY_SECTIONS[category]
    return from_ if import_type is ImportKind.FROM else direct


class ImportSections:
    """Fourteen append-only buckets: seven per scope.

    Insertion order is kept but carries no meaning; ordering is applied at
    format time.
    """

    def __init__(self) -> None:
        self._buckets: Dict[Tuple[Scope, Section], List[ImportStatement]] = {}
        self.clear()

    def append(self, scope: Scope, statement: ImportStatement) -> Section:
        section = section_for(statement.category, statement.import_type)
        self._buckets[scope, section].append(statement)
        return section

    def bucket(self, scope: Scope, section: Section) -> List[ImportStatement]:
        return self._buckets[scope, section]

    def buckets(self, scope: Scope) -> List[Tuple[Section, List[ImportStatement]]]:
        return [(section, self._buckets[scope, section]) for section in Section]

    def is_empty(self, scope: Scope = Scope.REGULAR) -> bool:
        return not any(statements for _, statements in self.buckets(scope))

    def count(self, scope: Scope = Scope.REGULAR) -> int:
        return sum(len(statements) for _, statements in self.buckets(scope))

    def clear(self) -> None:
        self._buckets = {(scope, section): [] for scope in Scope for section in Section}
