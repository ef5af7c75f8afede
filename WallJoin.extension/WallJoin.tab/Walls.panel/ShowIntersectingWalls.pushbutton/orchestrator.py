# -*- coding: utf-8 -*-
"""Show Intersecting Walls command: pick a wall, select its join candidates."""
import config_loader
from utils_revit import pick_element_id, select_element_ids, show_exception
from walljoin import logging_setup
from walljoin.candidates import candidate_ids
from walljoin.errors import UserCancelled
from walljoin.model import THICKNESS_THRESHOLD, CommandResult
from walljoin.report import format_candidates
from walljoin.revit_model import RevitModel, is_cancellation


logger = logging_setup.get_logger('commands.show_intersecting_walls')


def run(doc, uidoc, output=None, model=None, settings=None):
    """Returns (CommandResult, list of selected element ids)."""
    try:
        settings = settings or config_loader.load_settings()
        logging_setup.configure_from_settings(settings)
        model = model or RevitModel(doc)
        element_id = pick_element_id(uidoc, 'Select a wall')
        ids = candidate_ids(model, element_id, THICKNESS_THRESHOLD)
        select_element_ids(uidoc, ids)
    except UserCancelled:
        return CommandResult.CANCELLED, []
    except Exception as e:
        if is_cancellation(e):
            return CommandResult.CANCELLED, []
        logger.exception('show intersecting walls failed')
        show_exception(e)
        return CommandResult.FAILED, []

    message = format_candidates(element_id, ids)
    logger.info(message)
    if output is not None:
        output.print_md(message)
    return CommandResult.SUCCEEDED, ids
