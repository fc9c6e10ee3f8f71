"""
Course status merging.

Stateless functions that combine a stored course status with a partial
update and build the payloads written back to the content API. Inputs
are never mutated; every function returns new collections.
"""

from typing import Optional, List, Dict, Any, Iterable, Union

from app.schemas.course_status import (
    CourseStatus,
    CourseStatusInput,
    DocumentRef,
    ModuleProgressInput,
    ModuleStatus,
    SectionProgressInput,
    SectionStatus,
)


def _first_positions(ids: Iterable[Optional[str]]) -> Dict[Optional[str], int]:
    positions: Dict[Optional[str], int] = {}
    for index, item_id in enumerate(ids):
        positions.setdefault(item_id, index)
    return positions


def merge_modules(
    existing: Iterable[ModuleStatus],
    incoming: Iterable[ModuleProgressInput]
) -> List[ModuleStatus]:
    """
    Merge module progress deltas into a section's modules.

    Known modules keep their position and take the incoming progress; if
    the stored list repeats a module id, only its first entry is updated.
    Unknown modules are appended in the order they first appear. When a
    module id repeats in the deltas, the last value wins.

    Args:
        existing: Stored module statuses of the section
        incoming: Progress deltas for the section

    Returns:
        New list of module statuses
    """
    existing = list(existing)
    updates: Dict[str, Union[int, float]] = {}
    for delta in incoming:
        updates[delta.moduleId] = delta.progress

    first = _first_positions(module.module_id for module in existing)
    merged = [
        module.model_copy(update={"progress": updates[module.module_id]})
        if module.module_id in updates and first[module.module_id] == index else module
        for index, module in enumerate(existing)
    ]

    known = {module.module_id for module in existing}
    appended = [
        ModuleStatus(module=DocumentRef(documentId=module_id), progress=progress)
        for module_id, progress in updates.items()
        if module_id not in known
    ]

    return merged + appended


def merge_sections(
    existing: Iterable[SectionStatus],
    incoming: Iterable[SectionProgressInput]
) -> List[SectionStatus]:
    """
    Merge section deltas into a course status's sections.

    A section already present gets its modules merged; siblings are left
    untouched. If the stored list repeats a section id, only the first
    entry is merged. A new section is appended holding exactly the incoming
    modules.

    Args:
        existing: Stored section statuses
        incoming: Section deltas from the caller

    Returns:
        New list of section statuses
    """
    existing = list(existing)
    deltas: Dict[str, List[ModuleProgressInput]] = {}
    for delta in incoming:
        deltas[delta.sectionId] = deltas.get(delta.sectionId, []) + list(delta.modules)

    first = _first_positions(section.section_id for section in existing)
    merged = [
        section.model_copy(
            update={"modules": merge_modules(section.modules, deltas[section.section_id])}
        )
        if section.section_id in deltas and first[section.section_id] == index else section
        for index, section in enumerate(existing)
    ]

    known = {section.section_id for section in existing}
    appended = [
        SectionStatus(
            section=DocumentRef(documentId=section_id),
            modules=merge_modules([], modules)
        )
        for section_id, modules in deltas.items()
        if section_id not in known
    ]

    return merged + appended


def serialize_sections(sections: Iterable[SectionStatus]) -> List[Dict[str, Any]]:
    """
    Reduce section statuses to the reference-id shape the API accepts.

    Entries whose section or module relation is missing (e.g. the content
    was deleted in the CMS) are dropped.
    """
    return [
        {
            "section": section.section_id,
            "modules": [
                {"module": module.module_id, "progress": module.progress}
                for module in section.modules
                if module.module_id
            ],
        }
        for section in sections
        if section.section_id
    ]


def build_update_payload(
    data: CourseStatusInput,
    user_id: Union[int, str],
    existing: CourseStatus
) -> Dict[str, Any]:
    """
    Build the full replacement payload for an existing course status.

    Note that a falsy progress (0 or None) keeps the stored progress, so
    progress cannot be reset to 0 through an update. isFavourite is only
    replaced when given, including an explicit False.

    Args:
        data: Caller's partial update
        user_id: Owning user's id
        existing: Stored course status

    Returns:
        Payload for the "data" key of the update request
    """
    sections = merge_sections(existing.sections, data.sections or [])

    return {
        "course": data.course,
        "user": user_id,
        "progress": data.progress or existing.progress,
        "isFavourite": (
            data.isFavourite if data.isFavourite is not None else existing.isFavourite
        ),
        "sections": serialize_sections(sections),
    }


def build_create_payload(
    data: CourseStatusInput,
    user_id: Union[int, str]
) -> Dict[str, Any]:
    """
    Build the payload for a new course status.

    Sections and modules are taken as given; progress defaults to 0 and
    isFavourite to False.
    """
    return {
        "course": data.course,
        "user": user_id,
        "progress": data.progress or 0,
        "isFavourite": data.isFavourite or False,
        "sections": [
            {
                "section": section.sectionId,
                "modules": [
                    {"module": module.moduleId, "progress": module.progress}
                    for module in section.modules
                ],
            }
            for section in data.sections or []
        ],
    }


def find_course_status(
    statuses: Optional[Iterable[CourseStatus]],
    course_id: str
) -> Optional[CourseStatus]:
    """Return the first status whose course matches course_id, if any."""
    for status in statuses or []:
        if status.course_id == course_id:
            return status
    return None
