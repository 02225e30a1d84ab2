"""Region YAML loader.

Loads region definitions from ``numplan/metadata/data/*.yaml`` (or any
directory of region files) and returns ``RegionMetadata`` instances.

Document shape::

    id: US
    calling_code: "1"
    international_prefix: "011"
    national_prefix: "1"
    double_prefix: false
    categories:
      general:
        valid: '[2-9]\\d{9}'
        possible: '\\d{7}(?:\\d{3})?'
      fixed_line:
        valid: '[2-9]\\d{9}'
    formats:
      - pattern: '(\\d{3})(\\d{3})(\\d{4})'
        template: '(\\1) \\2-\\3'
        leading_digits: '[2-9]'
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from numplan.core.constants import GENERAL, KNOWN_CATEGORIES
from numplan.metadata.region import CategoryPatterns, FormatRule, RegionMetadata

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

_REQUIRED_FIELDS: frozenset[str] = frozenset({
    "id",
    "calling_code",
    "international_prefix",
    "categories",
})

_OPTIONAL_FIELDS: frozenset[str] = frozenset({
    "formats",
    "national_prefix",
    "national_prefix_for_parsing",
    "double_prefix",
})


def _check_pattern(path: Path, where: str, pattern: Any) -> str:
    if not isinstance(pattern, str) or not pattern:
        raise ValueError(f"{path}: {where} must be a non-empty string")
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"{path}: {where} is not a valid regular expression: {exc}") from exc
    return pattern


def _load_categories(path: Path, data: Any) -> dict[str, CategoryPatterns]:
    if not isinstance(data, dict):
        raise ValueError(f"{path}: categories must be a mapping of tag to patterns")
    if GENERAL not in data:
        raise ValueError(f"{path}: categories must include {GENERAL!r}")

    categories: dict[str, CategoryPatterns] = {}
    for tag, pair in data.items():
        if not isinstance(pair, dict) or "valid" not in pair:
            raise ValueError(f"{path}: category {tag!r} needs a 'valid' pattern")
        if tag not in KNOWN_CATEGORIES:
            logger.debug("loader: %s declares non-standard category %r", path.name, tag)
        valid = _check_pattern(path, f"categories.{tag}.valid", pair["valid"])
        possible = pair.get("possible")
        if possible is not None:
            possible = _check_pattern(path, f"categories.{tag}.possible", possible)
        categories[str(tag)] = CategoryPatterns(valid=valid, possible=possible)
    return categories


def _load_formats(path: Path, data: Any) -> tuple[FormatRule, ...]:
    if data is None:
        return ()
    if not isinstance(data, list):
        raise ValueError(f"{path}: formats must be a list")

    formats: list[FormatRule] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or "pattern" not in item or "template" not in item:
            raise ValueError(f"{path}: formats[{index}] needs 'pattern' and 'template'")
        leading = item.get("leading_digits")
        if leading is not None:
            leading = _check_pattern(path, f"formats[{index}].leading_digits", leading)
        formats.append(
            FormatRule(
                pattern=_check_pattern(path, f"formats[{index}].pattern", item["pattern"]),
                template=str(item["template"]),
                leading_digits=leading,
            )
        )
    return tuple(formats)


def load_region(path: str | Path) -> RegionMetadata:
    """Load a single region from a YAML file.

    Raises
    ------
    ValueError
        If the document is not a mapping, a required field is missing, the
        ``general`` category is absent, or any pattern fails to compile.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a YAML mapping, got {type(data).__name__}")

    missing = _REQUIRED_FIELDS - data.keys()
    if missing:
        raise ValueError(f"{path}: missing required fields: {sorted(missing)}")

    extra_keys = data.keys() - _REQUIRED_FIELDS - _OPTIONAL_FIELDS
    extra = {k: data[k] for k in extra_keys}

    international_prefix = data["international_prefix"]
    if international_prefix is not None:
        international_prefix = _check_pattern(
            path, "international_prefix", str(international_prefix)
        )

    national_prefix = data.get("national_prefix")
    national_prefix_for_parsing = data.get("national_prefix_for_parsing")
    if national_prefix_for_parsing is not None:
        national_prefix_for_parsing = _check_pattern(
            path, "national_prefix_for_parsing", str(national_prefix_for_parsing)
        )

    calling_code = str(data["calling_code"])
    if not calling_code.isdigit():
        raise ValueError(f"{path}: calling_code must be digits, got {calling_code!r}")

    return RegionMetadata(
        id=str(data["id"]),
        calling_code=calling_code,
        international_prefix=international_prefix,
        categories=_load_categories(path, data["categories"]),
        formats=_load_formats(path, data.get("formats")),
        national_prefix=str(national_prefix) if national_prefix is not None else None,
        national_prefix_for_parsing=national_prefix_for_parsing,
        double_prefix=bool(data.get("double_prefix", False)),
        extra=extra,
    )


def load_all_regions(directory: str | Path = DATA_DIR) -> list[RegionMetadata]:
    """Load all ``*.yaml`` region files from *directory*, sorted by file name.

    Raises
    ------
    ValueError
        If any YAML file fails validation.
    """
    directory = Path(directory)
    regions: list[RegionMetadata] = []
    for path in sorted(directory.iterdir()):
        if path.suffix not in (".yaml", ".yml"):
            continue
        regions.append(load_region(path))
    logger.debug("loader: loaded %d regions from %s", len(regions), directory)
    return regions
