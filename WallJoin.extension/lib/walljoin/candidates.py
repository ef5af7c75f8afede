# -*- coding: utf-8 -*-
"""Find walls whose bounding box intersects a reference wall."""
from typing import List

from walljoin import predicates
from walljoin.logging_setup import get_logger
from walljoin.model import (
    BOUNDING_BOX_TOLERANCE,
    THICKNESS_TOLERANCE,
    WALL_CATEGORY,
)


logger = get_logger(__name__)


def candidate_filter(reference_element, reference_box, min_thickness):
    """Compose the candidate predicate for one reference wall.

    Order matters only for speed: cheap identity and parameter checks run
    before the geometry query on each element.
    """
    return predicates.all_of(
        predicates.exclude_ids([reference_element.id]),
        predicates.thickness_at_least(min_thickness, THICKNESS_TOLERANCE),
        predicates.bounding_box_intersects(reference_box, BOUNDING_BOX_TOLERANCE),
        predicates.not_on_level(reference_element.base_level_id()),
    )


def find_candidates(model, reference_element, min_thickness) -> List:
    """Return walls that may be joined to `reference_element`.

    Candidates are walls other than the reference, at least `min_thickness`
    thick (within tolerance), whose bounding box intersects the reference
    bounding box, and whose base level differs from the reference's.

    Args:
        model: Host model (see `walljoin.model`).
        reference_element: Wall to search around. Must still exist.
        min_thickness: Minimum thickness in internal units.

    Returns:
        Candidate elements in model enumeration order.

    Raises:
        ElementNotFound: The reference is no longer in the model.
        ValueError: `min_thickness` is negative.
    """
    if min_thickness is None or float(min_thickness) < 0:
        raise ValueError("min_thickness must be a non-negative length")

    reference = model.get_element(reference_element.id)

    box = reference.bounding_box(include_hidden=True)
    if box is None:
        logger.warning("element %s has no geometry, no candidates", reference.id)
        return []

    return list(
        model.query_elements(
            WALL_CATEGORY, candidate_filter(reference, box, min_thickness)
        )
    )


def candidate_ids(model, element_id, min_thickness) -> List:
    """Resolve `element_id` and return the ids of its candidates."""
    reference = model.get_element(element_id)
    return [c.id for c in find_candidates(model, reference, min_thickness)]
