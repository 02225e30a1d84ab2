#!/usr/bin/env python3
"""Export region YAML files from the phonenumbers distribution's metadata.

Usage:
    python scripts/export_regions.py OUT_DIR              # every supported region
    python scripts/export_regions.py OUT_DIR US GB IN     # selected regions

Double-prefix flags come from NUMPLAN_DOUBLE_PREFIX_REGIONS.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import yaml

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from numplan.core.logging import setup_logging
from numplan.core.settings import get_settings
from numplan.metadata.phonenumbers_source import load_phonenumbers_regions
from numplan.metadata.region import RegionMetadata


def region_document(region: RegionMetadata) -> dict[str, Any]:
    """Return *region* in the shape ``load_region`` reads."""
    doc: dict[str, Any] = {
        "id": region.id,
        "calling_code": region.calling_code,
        "international_prefix": region.international_prefix,
    }
    if region.national_prefix is not None:
        doc["national_prefix"] = region.national_prefix
    if region.national_prefix_for_parsing is not None:
        doc["national_prefix_for_parsing"] = region.national_prefix_for_parsing
    doc["double_prefix"] = region.double_prefix

    categories: dict[str, dict[str, str]] = {}
    for tag, patterns in region.categories.items():
        pair = {"valid": patterns.valid}
        if patterns.possible is not None:
            pair["possible"] = patterns.possible
        categories[tag] = pair
    doc["categories"] = categories

    formats = []
    for rule in region.formats:
        item = {"pattern": rule.pattern, "template": rule.template}
        if rule.leading_digits is not None:
            item["leading_digits"] = rule.leading_digits
        formats.append(item)
    if formats:
        doc["formats"] = formats
    return doc


def export(out_dir: Path, region_codes: list[str] | None = None) -> list[Path]:
    """Write one ``<code>.yaml`` per region into *out_dir*; return the paths."""
    settings = get_settings()
    out_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    regions = load_phonenumbers_regions(
        region_codes or None,
        double_prefix_regions=settings.double_prefix_regions,
    )
    for region in regions:
        path = out_dir / f"{region.id.lower()}.yaml"
        with open(path, "w", encoding="utf-8") as fh:
            yaml.safe_dump(region_document(region), fh, sort_keys=False, allow_unicode=True)
        written.append(path)
    return written


def main() -> None:
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    setup_logging()
    written = export(Path(sys.argv[1]), [code.upper() for code in sys.argv[2:]])
    print(f"Exported {len(written)} regions to {sys.argv[1]}")


if __name__ == "__main__":
    main()
