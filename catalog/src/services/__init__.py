from catalog.src.services.archive import (
    add_material,
    filter_by_creator,
    filter_by_type,
    find_material,
    remove_material,
    update_material,
)

__all__ = [
    "add_material",
    "find_material",
    "filter_by_type",
    "update_material",
    "remove_material",
    "filter_by_creator",
]
