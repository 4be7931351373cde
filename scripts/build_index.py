from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from dotenv import load_dotenv

from src.indexing import SectionIndex, build_index, load_index_config, load_records
from src.models.configs import IndexConfig
from src.models.section import SortOrder
from src.settings import get_settings


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Group records into alphabetical sections.")
    parser.add_argument("records", type=Path, help="Records file (.json array, .jsonl or .yaml list)")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional index config (.yaml, .toml or .json) with fields, pins and reservations",
    )
    parser.add_argument("--key-field", help="Record field providing the compare string")
    parser.add_argument("--header-field", help="Record field used verbatim as the section header")
    parser.add_argument(
        "--sort-order",
        choices=[order.value for order in SortOrder],
        default=None,
        help="Header sort order (default: SECTION_INDEX_SORT_ORDER or ascending)",
    )
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> IndexConfig:
    settings = get_settings()
    config = load_index_config(args.config) if args.config else IndexConfig(sort_order=settings.sort_order)
    overrides: Dict[str, Any] = {}
    if args.key_field:
        overrides["key_field"] = args.key_field
    if args.header_field:
        overrides["header_field"] = args.header_field
    if args.sort_order:
        overrides["sort_order"] = SortOrder(args.sort_order)
    return config.model_copy(update=overrides)


def _label(record: Any, key_field: str | None) -> str:
    if key_field and isinstance(record, dict):
        return str(record.get(key_field, record))
    return str(record)


def render_text(index: SectionIndex[Any], key_field: str | None = None) -> str:
    lines: List[str] = []
    for section in range(index.number_of_sections()):
        title = index.title_for_header_in_section(section)
        rows = index.rows_in_section(section)
        lines.append(f"[{title if title is not None else '-'}] ({rows})")
        for row in range(index.addressable_rows(section)):
            if index.is_reserved_row(section, row):
                lines.append("  <reserved>")
            else:
                lines.append(f"  {_label(index.element_at(section, row), key_field)}")
    return "\n".join(lines)


def render_json(index: SectionIndex[Any]) -> str:
    payload = [
        {
            "header": index.title_for_header_in_section(section),
            "rows": index.rows_in_section(section),
            "elements": index.elements_in_section(section),
        }
        for section in range(index.number_of_sections())
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = resolve_config(args)
    records = load_records(args.records)
    index = build_index(records, config)

    if args.format == "json":
        print(render_json(index))
    else:
        print(render_text(index, config.key_field))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
