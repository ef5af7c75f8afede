# -*- coding: utf-8 -*-
"""Element predicates used to narrow wall queries.

Each factory returns a plain `element -> bool` callable. `all_of` chains
them the way a host collector chains its filters: in order, stopping at
the first one that rejects the element.
"""
from walljoin.model import BOUNDING_BOX_TOLERANCE, THICKNESS_TOLERANCE


def _element_id(element):
    return getattr(element, "id", None)


def exclude_ids(ids):
    excluded = frozenset(ids or ())

    def _predicate(element):
        return _element_id(element) not in excluded

    return _predicate


def thickness_at_least(min_thickness, tolerance=THICKNESS_TOLERANCE):
    """Pass elements with thickness >= min_thickness - tolerance."""
    limit = float(min_thickness) - float(tolerance)

    def _predicate(element):
        thickness = element.thickness()
        if thickness is None:
            return False
        return float(thickness) >= limit

    return _predicate


def bounding_box_intersects(box, tolerance=BOUNDING_BOX_TOLERANCE):
    """Pass elements whose stored bounding box meets `box` inflated by tolerance."""
    inflated = box.inflated(tolerance)

    def _predicate(element):
        other = element.bounding_box(include_hidden=False)
        if other is None:
            return False
        return inflated.intersects(other)

    return _predicate


def not_on_level(level_id):
    def _predicate(element):
        return element.base_level_id() != level_id

    return _predicate


def of_kind(kinds):
    wanted = frozenset(k.lower() for k in kinds or ())

    def _predicate(element):
        kind = getattr(element, "kind", None)
        return bool(kind) and kind.lower() in wanted

    return _predicate


def all_of(*predicates):
    chain = tuple(p for p in predicates if p is not None)

    def _predicate(element):
        for p in chain:
            if not p(element):
                return False
        return True

    return _predicate
