"""
In-memory archive of library materials: books, journals and newspapers.
"""

from catalog.src.models import Archive
from catalog.src.schema.materials import (
    AddResult,
    BookDetails,
    BookSubtypeEnum,
    JournalDetails,
    JournalSubtypeEnum,
    Material,
    MaterialTypeEnum,
    NewspaperDetails,
    NewspaperSubtypeEnum,
    UpdateResult,
)
from catalog.src.services import (
    add_material,
    filter_by_creator,
    filter_by_type,
    find_material,
    remove_material,
    update_material,
)

__all__ = [
    "Archive",
    "Material",
    "MaterialTypeEnum",
    "BookDetails",
    "BookSubtypeEnum",
    "JournalDetails",
    "JournalSubtypeEnum",
    "NewspaperDetails",
    "NewspaperSubtypeEnum",
    "AddResult",
    "UpdateResult",
    "add_material",
    "find_material",
    "filter_by_type",
    "update_material",
    "remove_material",
    "filter_by_creator",
]
