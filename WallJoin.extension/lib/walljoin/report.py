# -*- coding: utf-8 -*-
"""Markdown lines for the pyRevit output window."""
from utils_units import format_mm


def format_report(report, min_thickness=None, max_failures=50):
    lines = ["**Join walls**"]
    if min_thickness is not None:
        lines.append("Minimum wall thickness: **{0}**".format(format_mm(min_thickness)))
    lines.append("Walls scanned: **{0}**".format(report.walls_scanned))
    lines.append("Join attempts: **{0}**".format(report.join_attempts))
    lines.append("Joined: **{0}**".format(report.successes))
    if report.already_joined:
        lines.append("Already joined: **{0}**".format(report.already_joined))
    if report.skipped_unjoinable:
        lines.append("Skipped (unjoinable kind): **{0}**".format(report.skipped_unjoinable))

    failures = report.failures
    if not failures:
        return lines

    lines.append("Failed: **{0}**".format(len(failures)))
    limit = max(int(max_failures or 0), 0)
    for f in failures[:limit]:
        lines.append("- Wall {0} cannot be joined to {1}: {2}".format(
            f.element_a, f.element_b, f.reason))
    hidden = len(failures) - limit
    if hidden > 0:
        lines.append("- ... and {0} more (see log)".format(hidden))
    return lines


def format_candidates(reference_id, ids):
    if not ids:
        return "Wall {0}: no intersecting walls found.".format(reference_id)
    return "Wall {0} is intersected by {1} walls: {2}".format(
        reference_id, len(ids), ", ".join(str(i) for i in ids))
