# -*- coding: utf-8 -*-
"""Settings loader for Wall Join Tools.

Loads settings from a JSON file and fills in defaults for missing keys.
The wall thickness threshold and the geometric tolerances are constants
in `walljoin.model` and are not read from here.
"""
import json
import os

from walljoin.model import DEFAULT_TRANSACTION_NAME, UNJOINABLE_KINDS, WarningPolicy


DEFAULTS = {
    'transaction_name': DEFAULT_TRANSACTION_NAME,
    'warning_policy': WarningPolicy.RESOLVE,
    'unjoinable_wall_kinds': list(UNJOINABLE_KINDS),
    'report_max_failures': 50,
    'log_level': 'INFO',
    'log_file_name': 'walljoin.log',
}


def _extension_root_from_lib():
    """Extension root directory, derived from the lib folder."""
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_default_settings_path():
    return os.path.join(_extension_root_from_lib(), 'config', 'settings.default.json')


def _read_json(path):
    with open(path, 'rb') as fb:
        raw = fb.read()
    # utf-8-sig also strips a BOM written by Windows editors
    return json.loads(raw.decode('utf-8-sig'))


def load_settings(path=None):
    """Load settings from a JSON file.

    Args:
        path: Path to the JSON settings file. Defaults to
            config/settings.default.json inside the extension.

    Returns:
        Dict with every key of DEFAULTS present.

    Raises:
        IOError/OSError: The file cannot be read.
        ValueError: The file is not valid JSON, or a value is invalid.
    """
    settings_path = path or get_default_settings_path()
    data = _read_json(settings_path)
    if not isinstance(data, dict):
        raise ValueError('Settings file must contain a JSON object: {0}'.format(settings_path))

    for key, val in DEFAULTS.items():
        if key not in data:
            data[key] = list(val) if isinstance(val, list) else val

    data['warning_policy'] = WarningPolicy.parse(data['warning_policy'])
    data['unjoinable_wall_kinds'] = [str(k).lower() for k in data['unjoinable_wall_kinds'] or []]
    data['report_max_failures'] = int(data['report_max_failures'])
    return data

