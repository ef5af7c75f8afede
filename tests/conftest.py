# -*- coding: utf-8 -*-
"""Pytest fixtures for Wall Join Tools tests."""
import json
import os
import sys
import tempfile
import types
from unittest.mock import MagicMock

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "WallJoin.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)


# pyRevit only exists inside Revit; give the adapter the mocked DB namespace.
if "pyrevit" not in sys.modules:
    pyrevit_stub = types.ModuleType("pyrevit")
    from mocks.revit_api import DB as MockDB
    pyrevit_stub.DB = MockDB
    pyrevit_stub.UI = MagicMock()
    pyrevit_stub.forms = MagicMock()
    pyrevit_stub.revit = MagicMock()
    pyrevit_stub.script = MagicMock()
    sys.modules["pyrevit"] = pyrevit_stub


from mocks.wall_model import FakeModel, FakeWall  # noqa: E402


BOX_A = ((0.0, 0.0, 0.0), (10.0, 1.5, 10.0))
BOX_FAR = ((100.0, 100.0, 0.0), (110.0, 101.5, 10.0))


@pytest.fixture
def temp_settings_file():
    """Create a temporary settings file and return its path. Cleans up after test."""
    files = []

    def _create(data):
        f = tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8')
        json.dump(data, f, ensure_ascii=False)
        f.flush()
        f.close()
        files.append(f.name)
        return f.name

    yield _create

    for path in files:
        try:
            os.unlink(path)
        except OSError:
            pass


@pytest.fixture
def two_level_model():
    """Two overlapping thick walls (450 mm, 500 mm) on different levels."""
    return FakeModel([
        FakeWall(1, thickness_mm=450, level_id=10, box=BOX_A),
        FakeWall(2, thickness_mm=500, level_id=20, box=BOX_A),
    ])


@pytest.fixture
def same_level_model():
    """Same walls as two_level_model, both based on one level."""
    return FakeModel([
        FakeWall(1, thickness_mm=450, level_id=10, box=BOX_A),
        FakeWall(2, thickness_mm=500, level_id=10, box=BOX_A),
    ])


@pytest.fixture
def default_settings():
    return {
        'transaction_name': 'Join walls',
        'warning_policy': 'resolve',
        'unjoinable_wall_kinds': ['curtain'],
        'report_max_failures': 50,
        'log_level': 'INFO',
        'log_file_name': 'walljoin-test.log',
    }


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Keep the process-wide log handler out of the user's TEMP folder."""
    from walljoin import logging_setup

    monkeypatch.setenv("TEMP", str(tmp_path))
    logging_setup.reset_logging()
    yield
    logging_setup.reset_logging()
