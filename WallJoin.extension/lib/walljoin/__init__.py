# -*- coding: utf-8 -*-
"""Join thick walls to the walls intersecting them.

Host-independent core (candidate search, batch join, report) plus the
Revit adapter in `walljoin.revit_model`.
"""

from walljoin.candidates import candidate_ids, find_candidates
from walljoin.errors import (
    ElementNotFound,
    JoinError,
    TransactionFailed,
    UserCancelled,
    WallJoinError,
)
from walljoin.joiner import join_all_thick_walls
from walljoin.model import (
    THICKNESS_THRESHOLD,
    BoundingBox,
    CommandResult,
    JoinFailure,
    JoinReport,
    WarningPolicy,
)

__all__ = [
    "THICKNESS_THRESHOLD",
    "BoundingBox",
    "CommandResult",
    "ElementNotFound",
    "JoinError",
    "JoinFailure",
    "JoinReport",
    "TransactionFailed",
    "UserCancelled",
    "WallJoinError",
    "WarningPolicy",
    "candidate_ids",
    "find_candidates",
    "join_all_thick_walls",
]
