# -*- coding: utf-8 -*-
"""Join every thick wall to the thick walls intersecting it.

The whole batch runs inside one transaction. A join the host rejects is
recorded in the report and the batch moves on; anything else aborts the
batch and rolls the transaction back.
"""
from walljoin import predicates
from walljoin.candidates import find_candidates
from walljoin.errors import JoinError, UserCancelled
from walljoin.logging_setup import get_logger
from walljoin.model import (
    DEFAULT_TRANSACTION_NAME,
    THICKNESS_TOLERANCE,
    UNJOINABLE_KINDS,
    WALL_CATEGORY,
    JoinReport,
    WarningPolicy,
)
from walljoin.transactions import tx


logger = get_logger(__name__)


def collect_thick_walls(model, min_thickness):
    return list(
        model.query_elements(
            WALL_CATEGORY,
            predicates.thickness_at_least(min_thickness, THICKNESS_TOLERANCE),
        )
    )


def join_pair(model, wall, candidate, report):
    """Join one pair unless already joined. Returns True on a new join."""
    if model.are_joined(wall, candidate):
        report.already_joined += 1
        logger.debug("already joined wall_a=%s wall_b=%s", wall.id, candidate.id)
        return False

    report.join_attempts += 1
    try:
        model.join(wall, candidate)
    except JoinError as e:
        report.add_failure(wall.id, candidate.id, e.reason)
        logger.warning(
            "join failed wall_a=%s wall_b=%s reason=%s", wall.id, candidate.id, e.reason
        )
        return False

    report.successes += 1
    return True


def join_all_thick_walls(
    model,
    min_thickness,
    warning_policy=WarningPolicy.RESOLVE,
    unjoinable_kinds=UNJOINABLE_KINDS,
    transaction_name=DEFAULT_TRANSACTION_NAME,
    is_cancelled=None,
):
    """Join all walls at least `min_thickness` thick to their candidates.

    Args:
        model: Host model (see `walljoin.model`).
        min_thickness: Minimum thickness in internal units.
        warning_policy: How host warnings are handled in the transaction.
        unjoinable_kinds: Wall kinds never joined (curtain walls by default).
        transaction_name: Name shown in the host undo list.
        is_cancelled: Optional callable polled before each wall; returning
            True aborts the whole batch with no changes.

    Returns:
        JoinReport for the committed batch.

    Raises:
        UserCancelled: The batch was cancelled and rolled back.
        TransactionFailed: The host refused to commit.
    """
    unjoinable = predicates.of_kind(unjoinable_kinds)
    report = JoinReport()

    walls = collect_thick_walls(model, min_thickness)
    report.walls_scanned = len(walls)
    logger.info("thick walls found count=%s", len(walls))

    with tx(model, transaction_name, warning_policy):
        for wall in walls:
            if is_cancelled is not None and is_cancelled():
                raise UserCancelled("Join walls cancelled")

            candidates = find_candidates(model, wall, min_thickness)
            logger.info("wall %s is intersected by %s walls", wall.id, len(candidates))

            for candidate in candidates:
                if unjoinable(candidate):
                    report.skipped_unjoinable += 1
                    continue
                join_pair(model, wall, candidate, report)

    report.committed = True
    logger.info("join batch done %r", report)
    return report
