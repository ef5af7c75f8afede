# -*- coding: utf-8 -*-
__title__ = "Show\nIntersecting"
__doc__ = """Pick a wall to select the walls 400 mm or thicker whose
bounding box intersects it on another base level, i.e. the walls
Join Thick Walls would try to join it with."""

from pyrevit import revit
from pyrevit import script

import orchestrator


if __name__ == '__main__':
    orchestrator.run(revit.doc, revit.uidoc, output=script.get_output())
