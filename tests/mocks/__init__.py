# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .revit_api import DB, MockDocument, mock_wall, mock_xyz
from .wall_model import FakeModel, FakeWall

__all__ = ["DB", "FakeModel", "FakeWall", "MockDocument", "mock_wall", "mock_xyz"]
