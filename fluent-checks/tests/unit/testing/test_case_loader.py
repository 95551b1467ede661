from __future__ import annotations

import json
import logging
from pathlib import Path

import jsonschema
import pytest

from fluent_checks.errors import CaseFileError
from fluent_checks.testing.case_loader import (
    _load_schema,
    collector_from_mapping,
    load_case_table,
)


def test_parameter_table_schema_loadable() -> None:
    jsonschema.Draft202012Validator.check_schema(_load_schema())


def test_load_yaml_case_table(tmp_path: Path) -> None:
    path = tmp_path / "cases.yaml"
    path.write_text(
        "\n".join(
            [
                "description: affix checks",
                "cases:",
                "  - [' az ', false]",
                "  - values: ['az', true]",
                "    id: clean",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    collector = load_case_table(path)

    assert collector.build() == ((" az ", False), ("az", True))
    assert collector.ids == ["case0", "clean"]


def test_load_json_case_table(tmp_path: Path) -> None:
    path = tmp_path / "cases.json"
    path.write_text(json.dumps({"cases": [[1, 2], [3, 4]]}), encoding="utf-8")

    assert load_case_table(path).build() == ((1, 2), (3, 4))


@pytest.mark.parametrize(
    "table",
    [
        {},
        {"cases": []},
        {"cases": "nope"},
        {"cases": [1]},
        {"cases": [{"id": "missing-values"}]},
        {"cases": [[1]], "extra": True},
    ],
)
def test_invalid_tables_rejected(table: dict) -> None:
    with pytest.raises(CaseFileError, match="schema validation failed"):
        collector_from_mapping(table)


def test_unsupported_extension_rejected(tmp_path: Path) -> None:
    path = tmp_path / "cases.txt"
    path.write_text("cases: [[1]]\n", encoding="utf-8")

    with pytest.raises(CaseFileError, match="Unsupported"):
        load_case_table(path)


def test_non_object_top_level_rejected(tmp_path: Path) -> None:
    path = tmp_path / "cases.yaml"
    path.write_text("- [1, 2]\n", encoding="utf-8")

    with pytest.raises(CaseFileError, match="must be an object"):
        load_case_table(path)


def test_malformed_json_rejected(tmp_path: Path) -> None:
    path = tmp_path / "cases.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CaseFileError, match="invalid case file"):
        load_case_table(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_case_table(tmp_path / "absent.yaml")


def test_error_messages_point_at_the_offending_row(tmp_path: Path) -> None:
    path = tmp_path / "cases.json"
    path.write_text(json.dumps({"cases": [[1], "bad"]}), encoding="utf-8")

    with pytest.raises(CaseFileError) as excinfo:
        load_case_table(path)

    assert f"{path}:cases/1" in str(excinfo.value)


def test_loading_logs_row_count_at_debug(tmp_path: Path, caplog) -> None:
    path = tmp_path / "cases.json"
    path.write_text(json.dumps({"cases": [[1], [2]]}), encoding="utf-8")

    with caplog.at_level(logging.DEBUG, logger="fluent_checks.testing.case_loader"):
        load_case_table(path)

    assert any("rows=2" in r.getMessage() for r in caplog.records)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)
