"""
Bundled reference tables for talents, blueprints, prospects and workshop items.
"""

from .tables import (
    ReferenceTables,
    ReferenceTableError,
    TalentCategory,
    load_bundled_tables,
    parse_name_table,
    parse_rank_table,
)

__all__ = [
    "ReferenceTables",
    "ReferenceTableError",
    "TalentCategory",
    "load_bundled_tables",
    "parse_name_table",
    "parse_rank_table",
]
