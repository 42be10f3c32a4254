"""
icarus_editor: offline save editor for Icarus

Edits the offline profile and per-slot characters, unlocks talents,
blueprints, prospects and workshop items, and restores abandoned characters.
"""

__version__ = "0.1.0"
__author__ = "icarus-editor Contributors"

# Core service imports
from .save_data import SaveDataService, SaveMutator, SaveStore
from .reference import ReferenceTables, load_bundled_tables

# Main data models
from .save_data.models import (
    Character, Cosmetics, MetaResource, Profile, SaveLocation, Talent
)

__all__ = [
    # Services
    'SaveDataService',
    'SaveMutator',
    'SaveStore',

    # Reference data
    'ReferenceTables',
    'load_bundled_tables',

    # Data models
    'Character',
    'Cosmetics',
    'MetaResource',
    'Profile',
    'SaveLocation',
    'Talent',
]
