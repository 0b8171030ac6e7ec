"""
Operations over an in-memory material archive.

Every function here reports failure through its return value: a result
enum, ``None``, or an unchanged archive. Nothing is raised for a missing
title, a duplicate, a full archive or a bad subtype. Callers that prefer
exceptions can pass the result to ``catalog.core.error_handling.raise_for_result``.
"""

from typing import List, Optional

from catalog.core.logging import archive_logger, audit_event_logger
from catalog.src.models.archive import Archive
from catalog.src.schema.materials import (
    DETAILS_BY_TYPE,
    SUBTYPE_FAILURES,
    AddResult,
    Material,
    MaterialDetails,
    MaterialTypeEnum,
    UpdateResult,
)


def _type_name(material: Material) -> str:
    return getattr(material.type, "value", str(material.type))


def _index_of(archive: Archive, title: str) -> Optional[int]:
    for i in range(archive.count):
        if archive.slots[i].title == title:
            return i
    return None


def add_material(archive: Archive, material: Material) -> AddResult:
    """
    Append a copy of ``material`` to the end of the archive.

    The material's details are not checked against its type; any
    combination is stored as given.

    Args:
        archive: Archive to add to
        material: Material to store

    Returns:
        AddResult.OK, or AddResult.FAILED when the archive is full or a
        material with the same title is already stored
    """
    if archive.count >= archive.capacity:
        audit_event_logger.log_rejected_operation(
            action="add",
            title=material.title,
            reason="capacity exceeded",
            count=archive.count,
            capacity=archive.capacity,
        )
        return AddResult.FAILED

    if _index_of(archive, material.title) is not None:
        audit_event_logger.log_rejected_operation(
            action="add",
            title=material.title,
            reason="duplicate title",
            count=archive.count,
            capacity=archive.capacity,
        )
        return AddResult.FAILED

    archive.slots[archive.count] = material.model_copy(deep=True)
    archive.count += 1

    audit_event_logger.log_data_modification(
        action="add",
        title=material.title,
        material_type=_type_name(material),
        count=archive.count,
    )
    return AddResult.OK


def find_material(archive: Archive, title: str) -> Optional[Material]:
    """
    Look up a material by exact (case-sensitive) title.

    The returned object is the one stored in the archive, so changes made
    through it are visible in the archive. Once the material is removed
    the object is no longer part of the archive.
    """
    if archive.count == 0:
        return None

    index = _index_of(archive, title)
    if index is None:
        archive_logger.debug("Material not found", extra={'title': title})
        return None
    return archive.slots[index]


def filter_by_type(archive: Archive, material_type: MaterialTypeEnum) -> Archive:
    """Return a new archive holding copies of the materials of one type, in order."""
    filtered = Archive(capacity=archive.capacity)
    for material in archive:
        if material.type == material_type:
            filtered.slots[filtered.count] = material.model_copy(deep=True)
            filtered.count += 1

    archive_logger.debug(
        f"Filtered {filtered.count} of {archive.count} materials",
        extra={'material_type': getattr(material_type, "value", material_type)}
    )
    return filtered


def _has_valid_subtype(details: MaterialDetails, details_cls, subtype_enum) -> bool:
    if not isinstance(details, details_cls):
        return False
    try:
        subtype_enum(getattr(details, "subtype", None))
    except ValueError:
        return False
    return True


def update_material(
    archive: Optional[Archive],
    title: Optional[str],
    details: MaterialDetails,
) -> UpdateResult:
    """
    Replace the details of the material with the given title.

    The new details must be the variant belonging to the stored material's
    type and carry a subtype of that variant. The title and type of the
    material never change.

    Args:
        archive: Archive holding the material
        title: Exact title of the material to update
        details: Replacement details, copied into the archive

    Returns:
        UpdateResult.OK on success, otherwise the failure that stopped the
        update. A failed update leaves the material untouched.
    """
    if archive is None:
        return UpdateResult.INVALID_ARCHIVE
    if title is None:
        return UpdateResult.INVALID_TITLE

    material = find_material(archive, title)
    if material is None:
        audit_event_logger.log_rejected_operation(
            action="update", title=title, reason="not found"
        )
        return UpdateResult.NOT_FOUND

    try:
        details_cls, subtype_enum = DETAILS_BY_TYPE[material.type]
    except (KeyError, TypeError):
        audit_event_logger.log_rejected_operation(
            action="update", title=title, reason="invalid material type"
        )
        return UpdateResult.INVALID_MATERIAL_TYPE

    if not _has_valid_subtype(details, details_cls, subtype_enum):
        failure = SUBTYPE_FAILURES[material.type]
        audit_event_logger.log_rejected_operation(
            action="update", title=title, reason=failure.value.replace("_", " ")
        )
        return failure

    material.details = details.model_copy(deep=True)

    audit_event_logger.log_data_modification(
        action="update",
        title=title,
        material_type=_type_name(material),
        count=archive.count,
        changes=material.details.model_dump(mode="json"),
    )
    return UpdateResult.OK


def remove_material(archive: Archive, title: str) -> None:
    """
    Remove the material with the given title, keeping the order of the rest.

    Later materials shift down one slot and the freed last slot is reset
    to ``None``. An unknown title leaves the archive unchanged.
    """
    index = _index_of(archive, title)
    if index is None:
        return

    removed = archive.slots[index]
    for j in range(index, archive.count - 1):
        archive.slots[j] = archive.slots[j + 1]

    archive.count -= 1
    archive.slots[archive.count] = None

    audit_event_logger.log_data_modification(
        action="remove",
        title=title,
        material_type=_type_name(removed),
        count=archive.count,
    )


def filter_by_creator(
    archive: Optional[Archive],
    name: Optional[str],
) -> Optional[List[Material]]:
    """
    Collect copies of the materials created by ``name``.

    Books match on author, journals on publisher and newspapers on
    editor, all compared exactly.

    Returns:
        The matching materials in archive order, or ``None`` when the
        archive or name is missing, the name is empty, or nothing matches
    """
    if archive is None or name is None:
        return None
    if len(name) == 0:
        return None

    matches = []
    for material in archive:
        entry = DETAILS_BY_TYPE.get(material.type)
        if entry is None or not isinstance(material.details, entry[0]):
            continue
        if material.details.creator == name:
            matches.append(material.model_copy(deep=True))

    if not matches:
        return None
    return matches
