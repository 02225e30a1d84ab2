"""Metadata store — the immutable lookup table the analyzer reads.

The store is built once (from YAML files or from phonenumbers metadata)
and handed to ``PhoneAnalyzer``.  It has no mutating methods, so a single
instance can back any number of concurrent ``analyze()`` calls.
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from numplan.metadata.loader import DATA_DIR, load_all_regions
from numplan.metadata.region import RegionMetadata

if TYPE_CHECKING:
    from numplan.core.settings import Settings


class MetadataStore:
    """In-memory, read-only mapping of region id to ``RegionMetadata``.

    Iteration follows insertion order, which is the order detection walks
    the regions in.
    """

    def __init__(self, regions: Iterable[RegionMetadata] = ()) -> None:
        self._regions: dict[str, RegionMetadata] = {}
        for region in regions:
            if region.id in self._regions:
                raise ValueError(f"Duplicate region id: {region.id!r}")
            self._regions[region.id] = region

    def lookup(self, region_id: str | None) -> RegionMetadata | None:
        """Return the region for *region_id* (case-insensitive), or ``None``."""
        if not region_id:
            return None
        return self._regions.get(region_id.upper())

    def for_calling_code(self, calling_code: str) -> list[RegionMetadata]:
        """Return every region sharing *calling_code*, in store order."""
        return [r for r in self._regions.values() if r.calling_code == calling_code]

    @property
    def region_ids(self) -> list[str]:
        return list(self._regions)

    def __iter__(self) -> Iterator[RegionMetadata]:
        return iter(self._regions.values())

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, region_id: object) -> bool:
        return isinstance(region_id, str) and region_id.upper() in self._regions

    @classmethod
    def from_directory(cls, directory: str | Path = DATA_DIR) -> MetadataStore:
        """Return a store loaded from every region YAML file in *directory*."""
        return cls(load_all_regions(directory))

    @classmethod
    def from_phonenumbers(
        cls,
        region_codes: Iterable[str] | None = None,
        *,
        double_prefix_regions: Iterable[str] = (),
    ) -> MetadataStore:
        """Return a store built from the phonenumbers distribution's metadata."""
        from numplan.metadata.phonenumbers_source import load_phonenumbers_regions

        return cls(
            load_phonenumbers_regions(region_codes, double_prefix_regions=double_prefix_regions)
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> MetadataStore:
        """Return the store selected by ``NUMPLAN_METADATA_SOURCE``."""
        if settings is None:
            from numplan.core.settings import get_settings

            settings = get_settings()

        if settings.metadata_source == "phonenumbers":
            return cls.from_phonenumbers(double_prefix_regions=settings.double_prefix_regions)
        return cls.from_directory(settings.metadata_dir or DATA_DIR)
