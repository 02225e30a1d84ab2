"""Numbering-plan metadata package.

Holds the immutable per-region data the analyzer works against: calling
code, international prefix, category pattern pairs and formatting rules.
Regions are loaded from ``numplan/metadata/data/*.yaml`` (or a directory
named by ``NUMPLAN_METADATA_DIR``) or built from the ``phonenumbers``
distribution's metadata, and are collected into a ``MetadataStore``.
"""
