# -*- coding: utf-8 -*-

"""Wall Join Tools shared library.

This folder is auto-added to sys.path by pyRevit for this extension.
Keep modules dependency-free (pyRevit + RevitAPI only).

Modules:
    utils_units: Unit conversion between mm and feet
    utils_revit: pyRevit output, logging, alerts and selection helpers
    config_loader: Settings file loading
    walljoin: Candidate search, batch wall join and the Revit adapter
"""

__version__ = "0.1.0"
__author__ = "Wall Join Tools Team"
