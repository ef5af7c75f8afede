# -*- coding: utf-8 -*-
__title__ = "Join\nThick Walls"
__doc__ = """Joins the geometry of every wall 400 mm or thicker with the
thick walls whose bounding box intersects it on another base level.
Curtain walls are skipped. Host warnings are resolved silently and all
joins are made in one transaction."""

from pyrevit import revit
from pyrevit import script

import orchestrator
from utils_revit import alert
from walljoin.model import CommandResult


doc = revit.doc
output = script.get_output()


if __name__ == '__main__':
    result, report = orchestrator.run(doc, output)
    if result == CommandResult.FAILED:
        alert('Joining walls failed, no changes were made. See the pyRevit log.')
    elif result == CommandResult.SUCCEEDED and report.failures:
        alert('{0} wall pairs could not be joined. See the output window.'.format(
            len(report.failures)), warn_icon=False)
