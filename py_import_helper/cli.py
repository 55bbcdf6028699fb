#!/usr/bin/env python3
"""Command-line interface for py-import-helper using Click."""

from importlib import metadata
import logging
import sys
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple

import click
from py_import_helper import style_rules
from py_import_helper.core import ImportHelper
from py_import_helper.types import FormattingConfig


try:
    VERSION = f"py-import-helper {metadata.version('py-import-helper')}"
except metadata.PackageNotFoundError:
    VERSION = "py-import-helper"


TYPE_CHECKING_GUARDS = ("if TYPE_CHECKING:", "if typing.TYPE_CHECKING:")


def _scan_import_lines(lines: Iterable[str]) -> Iterator[Tuple[str, Optional[str], bool]]:
    """Yield ``(line, statement, type_checking)`` for lines of the import block.

    ``statement`` is set on the line that completes an import, joining
    parenthesized continuations. Indented imports after an unindented
    ``if TYPE_CHECKING:`` belong to the guarded block until the next
    unindented line.
    """
    pending: List[str] = []
    in_guard = False
    for line in lines:
        stripped = line.strip()
        if pending:
            pending.append(stripped)
            if ")" in stripped:
                yield line, " ".join(pending), in_guard
                pending = []
            else:
                yield line, None, in_guard
            continue
        if not stripped:
            yield line, None, in_guard
            continue
        indented = line[:1].isspace()
        if not indented:
            in_guard = stripped in TYPE_CHECKING_GUARDS
            if in_guard:
                yield line, None, False
                continue
        if not (stripped.startswith("import ") or stripped.startswith("from ")):
            continue
        if "(" in stripped and ")" not in stripped:
            pending = [stripped]
            yield line, None, in_guard
        else:
            yield line, stripped, in_guard
    if pending:
        yield "", " ".join(pending), in_guard


def iter_import_statements(lines: Iterable[str]) -> Iterator[Tuple[str, bool]]:
    """Yield ``(statement, type_checking)`` for each import found in ``lines``.

    Lines that do not start an import are skipped.
    """
    for _, statement, type_checking in _scan_import_lines(lines):
        if statement:
            yield statement, type_checking


def import_block_lines(lines: Iterable[str]) -> List[str]:
    """Return the lines making up the import block, without surrounding blanks."""
    block = [line.rstrip() for line, _, _ in _scan_import_lines(lines)]
    while block and not block[0]:
        block.pop(0)
    while block and not block[-1]:
        block.pop()
    return block


def _build_helper(package_name: Optional[str], local_prefixes: Tuple[str, ...],
                  profile: Optional[str], config_root: Optional[str]) -> ImportHelper:
    formatting = None
    prefixes = list(local_prefixes)
    if config_root:
        formatting = style_rules.read_formatting_config(config_root)
        prefixes.extend(style_rules.read_local_prefixes(config_root))
    if profile:
        formatting = FormattingConfig.from_profile(profile)

    if package_name:
        helper = ImportHelper.with_package_name(package_name, formatting=formatting)
    else:
        helper = ImportHelper(formatting=formatting)
    helper.add_local_package_prefixes(prefixes)
    return helper


def _organize(text: str, helper: ImportHelper, type_checking: Tuple[str, ...], check: bool) -> int:
    """Organize the imports in ``text`` and print or check the result.

    Returns:
        0 on success, 1 if check mode found the input unorganized.
    """
    for statement, type_checking_only in iter_import_statements(text.splitlines()):
        if type_checking_only:
            helper.add_type_checking_import(statement)
        else:
            helper.add_import_string(statement)
    for statement in type_checking:
        helper.add_type_checking_import(statement)

    logging.debug("Collected %d imports (%d TYPE_CHECKING)", helper.count(), helper.count_type_checking())
    rendered = helper.render()

    line_length = helper.formatting.line_length if helper.formatting else style_rules.DEFAULT_LINE_LENGTH
    for lineno, msg in style_rules.check_line_length(rendered.splitlines(), line_length):
        logging.warning("line %s: %s", lineno, msg)

    if check:
        if import_block_lines(text.splitlines()) != rendered.splitlines():
            logging.info("imports would be reorganized.")
            return 1
        logging.info("imports are already organized.")
        return 0

    click.echo(rendered, nl=False)
    return 0


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.version_option(version=VERSION, prog_name="pyimports")
def cli(verbose: bool, quiet: bool) -> None:
    """Organize Python imports into PEP 8 groups."""
    _configure_logging(verbose, quiet)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    """Send log records to stderr; later calls keep the first configuration."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


@cli.command(help="Print the organized form of the import statements in SOURCE.")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--package-name", default=None, help="Top-level package of the current project.")
@click.option("--local-prefix", "local_prefixes", multiple=True, help="Package prefix treated as local.")
@click.option("--type-checking", "type_checking", multiple=True,
              help="Import statement for the TYPE_CHECKING block.")
@click.option("--profile", type=click.Choice(["pep8", "isort", "black", "ruff"]), default=None,
              help="Formatting preset.")
@click.option("--config-root", type=click.Path(exists=True, file_okay=False, dir_okay=True), default=None,
              help="Directory whose pyproject.toml/setup.cfg/tox.ini configure formatting.")
@click.option("--check", is_flag=True, help="Exit with status 1 if SOURCE is not already organized.")
def organize(source, package_name: Optional[str], local_prefixes: Tuple[str, ...],
             type_checking: Tuple[str, ...], profile: Optional[str], config_root: Optional[str],
             check: bool) -> None:
    try:
        helper = _build_helper(package_name, local_prefixes, profile, config_root)
        exit_code = _organize(source.read(), helper, type_checking, check)
    except (OSError, ValueError) as exc:
        logging.error("ERROR: %s", exc)
        exit_code = 2
    sys.exit(exit_code)


def main(argv: Optional[List[str]] = None) -> None:
    """Run ``pyimports`` with ``argv`` (defaults to ``sys.argv[1:]``)."""
    cli.main(args=argv, prog_name="pyimports")


if __name__ == "__main__":
    main()
