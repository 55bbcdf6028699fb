import dataclasses
import logging
import re
import tomllib
from pathlib import Path

from py_import_helper.types import FormattingConfig

LOG = logging.getLogger(__name__)

DEFAULT_LINE_LENGTH = 79


def _read_pyproject_tools(root: Path) -> dict:
    toml_path = root / "pyproject.toml"
    if not toml_path.exists():
        return {}
    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        LOG.warning(f"Ignoring unreadable {toml_path}: {e}")
        return {}
    tools = data.get("tool", {})
    return tools if isinstance(tools, dict) else {}


def _tool_section(tools: dict, name: str) -> dict:
    """Return the [tool.<name>] table, or an empty one if it is not a table."""
    section = tools.get(name, {})
    if not isinstance(section, dict):
        LOG.warning(f"Ignoring [tool.{name}]: expected a table, got {type(section).__name__}")
        return {}
    return section


def _configured_line_length(root: Path, tools: dict):
    candidates = (
        _tool_section(tools, "isort").get("line_length"),
        _tool_section(tools, "black").get("line-length"),
        _tool_section(tools, "ruff").get("line-length"),
        _tool_section(tools, "flake8").get("max-line-length"),
    )
    for value in candidates:
        if isinstance(value, int) and value > 0:
            return value

    for cfg_name in ("setup.cfg", "tox.ini"):
        cfg = root / cfg_name
        if not cfg.exists():
            continue
        try:
            text = cfg.read_text(encoding="utf-8")
        except OSError as e:
            LOG.warning(f"Ignoring unreadable {cfg}: {e}")
            continue
        for line in text.splitlines():
            m = re.match(r"\s*max[-_]line[-_]length\s*=\s*(\d+)", line)
            if m:
                return int(m.group(1))
    return None


def read_line_length_config(root: str) -> int:
    """Detect max line length from isort/black/ruff/flake8 configs or use default."""
    root_path = Path(root)
    return _configured_line_length(root_path, _read_pyproject_tools(root_path)) or DEFAULT_LINE_LENGTH


def read_formatting_config(root: str) -> FormattingConfig:
    """Build a FormattingConfig from the project files found in ``root``.

    An isort ``profile`` picks the preset, a black or ruff section implies
    the 88 column preset, and explicit settings override either.
    """
    root_path = Path(root)
    tools = _read_pyproject_tools(root_path)
    isort_cfg = _tool_section(tools, "isort")

    config = FormattingConfig()
    profile = isort_cfg.get("profile")
    if isinstance(profile, str):
        try:
            config = FormattingConfig.from_profile(profile)
        except ValueError:
            LOG.warning(f"Unknown isort profile '{profile}', using PEP 8 defaults")
    elif isinstance(tools.get("black"), dict) or isinstance(tools.get("ruff"), dict):
        config = FormattingConfig.black_compatible()

    overrides = {}
    line_length = _configured_line_length(root_path, tools)
    if line_length:
        overrides["line_length"] = line_length
    indent = isort_cfg.get("indent")
    if isinstance(indent, str) and indent and indent.strip(" ") == "":
        overrides["indent_size"] = len(indent)
    elif isinstance(indent, int) and indent > 0:
        overrides["indent_size"] = indent
    if "include_trailing_comma" in isort_cfg:
        overrides["use_trailing_comma"] = bool(isort_cfg["include_trailing_comma"])
    if "force_single_line" in isort_cfg:
        overrides["force_single_line"] = bool(isort_cfg["force_single_line"])

    LOG.debug(f"Formatting overrides from {root}: {overrides}")
    return dataclasses.replace(config, **overrides)


def read_local_prefixes(root: str) -> list[str]:
    """Return the ``known_first_party`` packages declared for isort."""
    first_party = _tool_section(_read_pyproject_tools(Path(root)), "isort").get("known_first_party", [])
    if isinstance(first_party, str):
        first_party = first_party.split(",")
    return [p.strip() for p in first_party if isinstance(p, str) and p.strip()]


def check_line_length(lines: list[str], max_length: int) -> list[tuple[int, str]]:
    """Return list of (lineno, message) for long lines."""
    warnings = []
    for i, line in enumerate(lines, 1):
        if len(line) > max_length:
            warnings.append((i, f"E501: line too long ({len(line)} > {max_length})"))
    return warnings
