import pytest

from py_import_helper import FormattingConfig
from py_import_helper import ImportHelper
from py_import_helper import ImportSpec
from py_import_helper import PackageRegistry
from py_import_helper.sections import Scope
from py_import_helper.sections import Section


def test_empty_helper():
    helper = ImportHelper()
    assert helper.is_empty()
    assert helper.is_type_checking_empty()
    assert helper.count() == 0
    assert helper.count_type_checking() == 0
    assert helper.get_formatted() == []
    assert helper.get_categorized() == ([], [], [], [])
    assert helper.render() == ""


def test_blank_statements_are_ignored():
    helper = ImportHelper()
    helper.add_import_string("")
    helper.add_import_string("   \t")
    helper.add_type_checking_import("  ")
    assert helper.count() == 0
    assert helper.is_type_checking_empty()
    assert helper.is_empty()


def test_full_block_ordering():
    helper = ImportHelper.with_package_name("myapp")
    helper.add_import_strings([
        "from myapp.models import User",
        "from pydantic import BaseModel",
        "import sys",
        "from typing import Any",
        "import httpx",
        "from .utils import helper",
        "from __future__ import annotations",
    ])

    assert helper.get_formatted() == [
        "from __future__ import annotations",
        "",
        "import sys",
        "from typing import Any",
        "",
        "import httpx",
        "from pydantic import BaseModel",
        "",
        "from .utils import helper",
        "from myapp.models import User",
    ]


def test_merging_same_package():
    helper = ImportHelper()
    for _ in range(3):
        helper.add_import_string("from typing import Optional, Any")
    helper.add_from_import("typing", ["List"])
    assert helper.get_formatted() == ["from typing import Any, List, Optional"]
    assert helper.count() == 4


def test_direct_imports_before_from_imports():
    helper = ImportHelper()
    helper.add_from_import("typing", ["Any"])
    helper.add_direct_import("sys")
    helper.add_from_import("json", ["loads"])
    helper.add_direct_import("json")

    categorized = helper.get_categorized()
    assert categorized.stdlib == [
        "import json",
        "import sys",
        "from json import loads",
        "from typing import Any",
    ]
    assert categorized.third_party == []


def test_multiline_lines_stay_together_in_categories():
    helper = ImportHelper()
    helper.add_from_import("typing", ["Any", "Dict", "List", "Optional", "Union"])
    helper.add_direct_import("os")
    assert helper.get_categorized().stdlib == [
        "import os",
        "from typing import (",
        "    Any,",
        "    Dict,",
        "    List,",
        "    Optional,",
        "    Union,",
        ")",
    ]


def test_relative_imports_are_local():
    helper = ImportHelper()
    helper.add_import_string("from . import sibling")
    helper.add_import_string("from .. import parent")
    helper.add_import_string("from ..sibling import example")
    assert helper.get_categorized().local == [
        "from . import sibling",
        "from .. import parent",
        "from ..sibling import example",
    ]


def test_local_package_prefixes():
    helper = ImportHelper()
    helper.add_local_package_prefixes(["myapp", "tests"])
    helper.add_import_string("from myapp.models import User")
    helper.add_import_string("from tests.conftest import fixture")
    helper.add_import_string("import requests")
    future, stdlib, third_party, local = helper.get_categorized()
    assert len(local) == 2
    assert third_party == ["import requests"]
    assert helper.local_package_prefixes == {"myapp", "tests"}


def test_type_checking_marker_injected_once():
    helper = ImportHelper()
    helper.add_type_checking_from_import("httpx", ["Client"])
    helper.add_type_checking_from_import("collections.abc", ["Callable"])
    helper.add_type_checking_direct_import("logging")

    stdlib_from = helper.sections.bucket(Scope.REGULAR, Section.STANDARD_LIBRARY_FROM)
    assert len(stdlib_from) == 1
    assert stdlib_from[0].items == ["TYPE_CHECKING"]
    assert helper.get_formatted() == ["from typing import TYPE_CHECKING"]
    assert helper.count_type_checking() == 3


def test_type_checking_marker_merged_into_existing_typing_import():
    helper = ImportHelper()
    helper.add_import_string("from typing import Optional, Any")
    helper.add_type_checking_import("from httpx import Client")
    helper.add_type_checking_import("from httpx import Response")

    stdlib_from = helper.sections.bucket(Scope.REGULAR, Section.STANDARD_LIBRARY_FROM)
    assert len(stdlib_from) == 1
    assert stdlib_from[0].statement == "from typing import TYPE_CHECKING, Any, Optional"
    assert helper.get_formatted() == ["from typing import TYPE_CHECKING, Any, Optional"]


def test_existing_type_checking_import_is_kept():
    helper = ImportHelper()
    helper.add_import_string("from typing import TYPE_CHECKING")
    helper.add_type_checking_from_import("collections.abc", ["Callable"])
    assert helper.count() == 1
    assert helper.get_type_checking_categorized().stdlib == ["from collections.abc import Callable"]


def test_get_all_categorized():
    helper = ImportHelper.with_package_name("myapp")
    helper.add_import_string("from __future__ import annotations")
    helper.add_import_string("import json")
    helper.add_import_string("from pydantic import BaseModel")
    helper.add_import_string("from myapp.core import Engine")
    helper.add_type_checking_import("from httpx import Client")

    result = helper.get_all_categorized()
    assert result.future == ["from __future__ import annotations"]
    assert result.stdlib == ["import json", "from typing import TYPE_CHECKING"]
    assert result.third_party == ["from pydantic import BaseModel"]
    assert result.local == ["from myapp.core import Engine"]
    assert result.type_checking_future == []
    assert result.type_checking_stdlib == []
    assert result.type_checking_third_party == ["from httpx import Client"]
    assert result.type_checking_local == []


def test_render_with_type_checking_block():
    helper = ImportHelper()
    helper.add_direct_import("json")
    helper.add_type_checking_from_import("httpx", ["Response", "Client"])
    helper.add_type_checking_direct_import("logging")

    assert helper.render() == (
        "import json\n"
        "from typing import TYPE_CHECKING\n"
        "\n"
        "if TYPE_CHECKING:\n"
        "    import logging\n"
        "\n"
        "    from httpx import Client, Response\n"
    )


def test_import_spec_api():
    helper = ImportHelper()
    helper.add_imports([
        ImportSpec.direct("sys"),
        ImportSpec("os", []),
        ImportSpec.from_items("typing", ["Any", "Optional"]),
        ImportSpec.type_checking_from("httpx", ["Client"]),
        ImportSpec.direct("pandas").as_type_checking(),
    ])
    all_imports = helper.get_all_categorized()
    assert all_imports.stdlib == ["import os", "import sys", "from typing import TYPE_CHECKING, Any, Optional"]
    assert all_imports.type_checking_third_party == ["import pandas", "from httpx import Client"]


def test_import_spec_without_items_is_direct():
    assert ImportSpec("os", []).to_statement() == "import os"
    assert ImportSpec("os").to_statement() == "import os"
    assert ImportSpec("os", ["path"]).to_statement() == "from os import path"


def test_import_spec_requires_package():
    with pytest.raises(ValueError):
        ImportSpec("  ")


def test_registry_changes_need_cache_clear():
    helper = ImportHelper()
    helper.add_import_string("import attrs")
    helper.registry.add_stdlib("attrs")
    helper.add_import_string("from attrs import define")
    assert helper.get_categorized().third_party == ["import attrs", "from attrs import define"]

    helper.clear_cache().reset()
    helper.add_import_string("from attrs import define")
    assert helper.get_categorized().stdlib == ["from attrs import define"]


def test_custom_registry():
    registry = PackageRegistry().add_third_party("typing").remove_stdlib("typing")
    helper = ImportHelper(registry=registry)
    helper.add_import_string("from typing import Any")
    assert helper.get_categorized().third_party == ["from typing import Any"]


def test_reset_keeps_configuration():
    helper = ImportHelper.with_package_name("myapp")
    helper.add_import_string("import os")
    helper.add_import_string("from myapp import models")
    assert helper.count() == 2

    helper.clear()
    assert helper.is_empty()
    assert helper.count() == 0

    helper.add_import_string("from myapp.utils import helper")
    assert helper.get_categorized().local == ["from myapp.utils import helper"]


def test_clone_config():
    helper = ImportHelper.with_package_name("myapp")
    helper.registry.add_third_party("attrs")
    helper.add_import_string("from myapp.models import User")

    clone = helper.clone_config()
    assert clone.is_empty()
    assert clone.package_name == "myapp"
    clone.add_import_string("from myapp.models import Post")
    clone.registry.remove_third_party("attrs")

    assert helper.count() == 1
    assert clone.count() == 1
    assert helper.get_categorized().local == ["from myapp.models import User"]
    assert clone.get_categorized().local == ["from myapp.models import Post"]
    assert helper.registry.is_third_party("attrs")


def test_formatting_config_is_applied():
    helper = ImportHelper(formatting=FormattingConfig(force_single_line=True))
    helper.add_from_import("typing", ["Any", "Dict", "List", "Optional", "Union"])
    assert helper.get_formatted() == ["from typing import Any, Dict, List, Optional, Union"]


def test_create_model_imports():
    helper = ImportHelper()
    helper.create_model_imports([
        "datetime",
        "UUID",
        "Decimal",
        "dict[str, Any]",
        "Callable[[int], str]",
        "date",
        "datetime",
    ])
    assert helper.get_formatted() == [
        "from collections.abc import Callable",
        "from datetime import date, datetime",
        "from decimal import Decimal",
        "from typing import Any",
        "from uuid import UUID",
        "",
        "from pydantic import BaseModel, ConfigDict, Field",
    ]
