"""Package registry for import categorization.

The registry holds the package names known to belong to the standard library
and to third-party distributions. Both sets can be edited at runtime to cope
with custom packages or other Python versions.
"""
from __future__ import annotations
import logging
import sys
from typing import Iterable
from typing import Optional
from typing import Set

LOG = logging.getLogger(__name__)

PYTHON_STDLIB_MODULES = (
    "os",
    "sys",
    "json",
    "re",
    "datetime",
    "time",
    "collections",
    "collections.abc",
    "itertools",
    "functools",
    "operator",
    "typing",
    "pathlib",
    "logging",
    "uuid",
    "hashlib",
    "base64",
    "urllib",
    "http",
    "email",
    "html",
    "xml",
    "sqlite3",
    "csv",
    "io",
    "tempfile",
    "shutil",
    "glob",
    "fnmatch",
    "linecache",
    "pickle",
    "copy",
    "math",
    "random",
    "statistics",
    "decimal",
    "fractions",
    "contextlib",
    "abc",
    "atexit",
    "traceback",
    "gc",
    "weakref",
    "enum",
    "dataclasses",
    "concurrent",
    "asyncio",
    "threading",
    "multiprocessing",
    "subprocess",
    "socket",
    "select",
    "ssl",
    "ipaddress",
    "argparse",
    "configparser",
    "getpass",
    "locale",
    "platform",
    "sysconfig",
    "types",
    "warnings",
)

COMMON_THIRD_PARTY_PACKAGES = (
    "pydantic",
    "httpx",
    "requests",
    "fastapi",
    "flask",
    "django",
    "numpy",
    "pandas",
    "pytest",
    "sqlalchemy",
)


class PackageRegistry:
    """Known standard library and third-party package names.

    Membership is an exact, case-sensitive string match. All mutators return
    the registry so calls can be chained::

        registry.add_stdlib("tomllib").add_third_party("attrs")
    """

    def __init__(self, stdlib: Optional[Iterable[str]] = None,
                 third_party: Optional[Iterable[str]] = None) -> None:
        self._stdlib: Set[str] = set(PYTHON_STDLIB_MODULES if stdlib is None else stdlib)
        self._third_party: Set[str] = set(
            COMMON_THIRD_PARTY_PACKAGES if third_party is None else third_party)

    @classmethod
    def from_interpreter(cls) -> "PackageRegistry":
        """Return a registry whose stdlib set also covers the running interpreter."""
        registry = cls()
        modules: Set[str] = set(sys.builtin_module_names)
        modules.update(getattr(sys, "stdlib_module_names", ()))
        registry.add_stdlib_many(modules)
        LOG.debug(f"Registry seeded with {registry.count_stdlib()} stdlib modules")
        return registry

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(stdlib={self.count_stdlib()}, "
                f"third_party={self.count_third_party()})")

    def is_stdlib(self, package: str) -> bool:
        return package in self._stdlib

    def is_third_party(self, package: str) -> bool:
        return package in self._third_party

    def add_stdlib(self, package: str) -> "PackageRegistry":
        self._stdlib.add(package)
        return self

    def add_third_party(self, package: str) -> "PackageRegistry":
        self._third_party.add(package)
        return self

    def remove_stdlib(self, package: str) -> "PackageRegistry":
        self._stdlib.discard(package)
        return self

    def remove_third_party(self, package: str) -> "PackageRegistry":
        self._third_party.discard(package)
        return self

    def add_stdlib_many(self, packages: Iterable[str]) -> "PackageRegistry":
        self._stdlib.update(packages)
        return self

    def add_third_party_many(self, packages: Iterable[str]) -> "PackageRegistry":
        self._third_party.update(packages)
        return self

    def remove_stdlib_many(self, packages: Iterable[str]) -> "PackageRegistry":
        self._stdlib.difference_update(packages)
        return self

    def remove_third_party_many(self, packages: Iterable[str]) -> "PackageRegistry":
        self._third_party.difference_update(packages)
        return self

    def clear_stdlib(self) -> "PackageRegistry":
        self._stdlib.clear()
        return self

    def clear_third_party(self) -> "PackageRegistry":
        self._third_party.clear()
        return self

    def reset_stdlib_to_defaults(self) -> "PackageRegistry":
        self._stdlib = set(PYTHON_STDLIB_MODULES)
        return self

    def reset_third_party_to_defaults(self) -> "PackageRegistry":
        self._third_party = set(COMMON_THIRD_PARTY_PACKAGES)
        return self

    def count_stdlib(self) -> int:
        return len(self._stdlib)

    def count_third_party(self) -> int:
        return len(self._third_party)

    def copy(self) -> "PackageRegistry":
        """Return an independent registry with the same contents."""
        return type(self)(self._stdlib, self._third_party)
