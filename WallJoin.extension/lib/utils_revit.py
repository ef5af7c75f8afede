# -*- coding: utf-8 -*-

import traceback

from pyrevit import DB
from pyrevit import forms
from pyrevit import script


def get_output():
    return script.get_output()


def get_logger():
    return script.get_logger()


def _safe_log(logger_method, msg):
    try:
        logger_method(msg)
    except UnicodeEncodeError:
        try:
            # Fallback to repr which escapes non-ascii
            logger_method(repr(msg))
        except Exception:
            logger_method("<Log message encoding failed>")
    except Exception:
        pass


def alert(msg, title='Wall Join Tools', warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # As a last resort if UI is unavailable
        _safe_log(get_logger().warning, msg)


def log_exception(prefix='Error'):
    logger = get_logger()
    _safe_log(logger.error, prefix)
    _safe_log(logger.error, traceback.format_exc())


def show_exception(exc, title='Exception'):
    """Dialog with the exception message and stack trace."""
    alert(
        'Message: {0}\nStackTrace: {1}'.format(safe_str(exc), traceback.format_exc()),
        title=title,
    )


def safe_str(obj):
    try:
        return str(obj)
    except Exception:
        try:
            return repr(obj)
        except Exception:
            return '<unprintable>'


def pick_element_id(uidoc, prompt='Select an element'):
    """Let the user pick one element; returns its integer id.

    Raises the host OperationCanceledException when the user presses Esc.
    """
    from Autodesk.Revit.UI.Selection import ObjectType
    from walljoin.revit_model import element_id_value

    ref = uidoc.Selection.PickObject(ObjectType.Element, prompt)
    return element_id_value(ref.ElementId)


def select_element_ids(uidoc, ids):
    """Replace the current selection with the given element ids."""
    from System.Collections.Generic import List

    id_list = List[DB.ElementId]([DB.ElementId(int(i)) for i in ids])
    uidoc.Selection.SetElementIds(id_list)
    return len(ids)
