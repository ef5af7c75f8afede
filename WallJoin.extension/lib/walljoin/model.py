# -*- coding: utf-8 -*-
"""Host-independent data model for the wall join tools.

The host model itself is only reached through the interface described
below; `walljoin.revit_model` implements it over the Revit API and
`tests/mocks/wall_model.py` implements it in memory.

Model:
    query_elements(category, predicate) -> list of elements
    get_element(element_id) -> element (raises ElementNotFound)
    are_joined(a, b) -> bool
    join(a, b) (raises JoinError)
    start_transaction(name, warning_policy) -> transaction

Element:
    id, category, kind
    thickness() -> float (internal units) or None
    bounding_box(include_hidden) -> BoundingBox or None
        (full geometry with hidden objects, or the cheap stored box)
    base_level_id() -> level identifier

Transaction:
    commit() (raises TransactionFailed), rollback()
"""
from typing import List, Sequence, Tuple

from utils_units import mm_to_ft


WALL_CATEGORY = "walls"

THICKNESS_THRESHOLD_MM = 400
THICKNESS_THRESHOLD = mm_to_ft(THICKNESS_THRESHOLD_MM)

# Both in internal units (feet)
THICKNESS_TOLERANCE = 0.1
BOUNDING_BOX_TOLERANCE = 0.1

CURTAIN_KIND = "curtain"
UNJOINABLE_KINDS = (CURTAIN_KIND,)

DEFAULT_TRANSACTION_NAME = "Join walls"


class WarningPolicy(object):
    """How warnings raised inside a transaction are handled.

    SHOW leaves them to the host (interactive dialogs). SUPPRESS deletes
    every warning. RESOLVE deletes warnings and also resolves errors the
    host permits to be resolved, so a batch can run unattended.
    """

    SHOW = "show"
    SUPPRESS = "suppress"
    RESOLVE = "resolve"

    ALL = (SHOW, SUPPRESS, RESOLVE)

    @classmethod
    def parse(cls, value):
        key = (value or "").strip().lower()
        if key not in cls.ALL:
            raise ValueError(
                "Unknown warning policy '{0}', expected one of: {1}".format(
                    value, ", ".join(cls.ALL)
                )
            )
        return key


class CommandResult(object):
    """Outcome reported back to the host for one command invocation."""

    SUCCEEDED = "succeeded"
    CANCELLED = "cancelled"
    FAILED = "failed"


class BoundingBox(object):
    """Axis-aligned box given by its minimum and maximum corners."""

    def __init__(self, minimum: Sequence[float], maximum: Sequence[float]):
        self.minimum = tuple(float(v) for v in minimum)
        self.maximum = tuple(float(v) for v in maximum)
        if len(self.minimum) != 3 or len(self.maximum) != 3:
            raise ValueError("BoundingBox corners must be (x, y, z) triples")

    def inflated(self, tolerance: float) -> "BoundingBox":
        return BoundingBox(
            [v - tolerance for v in self.minimum],
            [v + tolerance for v in self.maximum],
        )

    def intersects(self, other: "BoundingBox", tolerance: float = 0.0) -> bool:
        """Inclusive overlap test with `self` inflated by `tolerance`.

        Touching boxes intersect.
        """
        box = self.inflated(tolerance) if tolerance else self
        for axis in range(3):
            if other.minimum[axis] > box.maximum[axis]:
                return False
            if other.maximum[axis] < box.minimum[axis]:
                return False
        return True

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return False
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "BoundingBox({0}, {1})".format(self.minimum, self.maximum)


class JoinFailure(object):
    """One wall pair the host refused to join."""

    def __init__(self, element_a, element_b, reason: str):
        self.element_a = element_a
        self.element_b = element_b
        self.reason = reason

    def as_tuple(self) -> Tuple:
        return (self.element_a, self.element_b, self.reason)

    def __eq__(self, other):
        if not isinstance(other, JoinFailure):
            return False
        return self.as_tuple() == other.as_tuple()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "JoinFailure({0}, {1}, {2!r})".format(
            self.element_a, self.element_b, self.reason
        )


class JoinReport(object):
    """Counters and failures collected by one join batch."""

    def __init__(self):
        self.walls_scanned = 0
        self.join_attempts = 0
        self.successes = 0
        self.already_joined = 0
        self.skipped_unjoinable = 0
        self.failures: List[JoinFailure] = []
        self.committed = False

    @property
    def succeeded(self) -> bool:
        return self.committed

    def add_failure(self, element_a, element_b, reason: str) -> JoinFailure:
        failure = JoinFailure(element_a, element_b, reason)
        self.failures.append(failure)
        return failure

    def as_dict(self) -> dict:
        return {
            "walls_scanned": self.walls_scanned,
            "join_attempts": self.join_attempts,
            "successes": self.successes,
            "already_joined": self.already_joined,
            "skipped_unjoinable": self.skipped_unjoinable,
            "failures": [f.as_tuple() for f in self.failures],
            "committed": self.committed,
        }

    def __repr__(self):
        return (
            "JoinReport(scanned={0}, attempts={1}, successes={2}, "
            "already_joined={3}, skipped={4}, failures={5})".format(
                self.walls_scanned,
                self.join_attempts,
                self.successes,
                self.already_joined,
                self.skipped_unjoinable,
                len(self.failures),
            )
        )
