import json
from pathlib import Path

from scripts.build_index import main


def _write_records(tmp_path: Path) -> Path:
    path = tmp_path / "records.json"
    path.write_text(json.dumps(["apple", "Banana", "avocado", "cherry"]), encoding="utf-8")
    return path


def test_build_index_script_text_output(tmp_path: Path, capsys) -> None:
    records = _write_records(tmp_path)

    assert main([str(records), "--sort-order", "ascending"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[A] (2)",
        "  apple",
        "  avocado",
        "[B] (1)",
        "  Banana",
        "[C] (1)",
        "  cherry",
    ]


def test_build_index_script_json_with_config(tmp_path: Path, capsys) -> None:
    records = _write_records(tmp_path)
    config = tmp_path / "index.yaml"
    config.write_text(
        "sort_order: descending\n"
        "reserved_sections:\n"
        "  - section: 0\n"
        "    rows: 2\n",
        encoding="utf-8",
    )

    assert main([str(records), "--config", str(config), "--format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert [item["header"] for item in payload] == [None, "C", "B", "A"]
    assert payload[0] == {"header": None, "rows": 2, "elements": []}
    assert payload[3]["elements"] == ["apple", "avocado"]


def test_build_index_script_marks_reserved_rows(tmp_path: Path, capsys) -> None:
    records = _write_records(tmp_path)
    config = tmp_path / "index.json"
    config.write_text(json.dumps({"reserved_rows": [{"section": 1, "row": 0}]}), encoding="utf-8")

    main([str(records), "--config", str(config)])

    out = capsys.readouterr().out.splitlines()
    assert out[3:6] == ["[B] (1)", "  <reserved>", "  Banana"]


def test_build_index_script_prints_null_records(tmp_path: Path, capsys) -> None:
    records = tmp_path / "records.json"
    records.write_text(json.dumps([None, "nut"]), encoding="utf-8")

    main([str(records), "--sort-order", "ascending"])

    assert capsys.readouterr().out.splitlines() == ["[N] (2)", "  None", "  nut"]
