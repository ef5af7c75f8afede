# -*- coding: utf-8 -*-
"""Join Thick Walls command: settings, logging, batch join, report."""
import config_loader
from utils_revit import log_exception
from walljoin import logging_setup
from walljoin.errors import UserCancelled
from walljoin.joiner import join_all_thick_walls
from walljoin.model import THICKNESS_THRESHOLD, CommandResult
from walljoin.report import format_report
from walljoin.revit_model import RevitModel, is_cancellation


logger = logging_setup.get_logger('commands.join_thick_walls')


def print_report(output, report, settings):
    if output is None:
        return
    for line in format_report(
        report,
        min_thickness=THICKNESS_THRESHOLD,
        max_failures=settings.get('report_max_failures', 50),
    ):
        output.print_md(line)


def run(doc, output, model=None, settings=None, is_cancelled=None):
    """Run the batch join on `doc`.

    Returns:
        (CommandResult, JoinReport or None). Per-pair join failures do not
        change the result; they are listed in the report.
    """
    try:
        settings = settings or config_loader.load_settings()
        logging_setup.configure_from_settings(settings)
        model = model or RevitModel(doc)
        report = join_all_thick_walls(
            model,
            THICKNESS_THRESHOLD,
            warning_policy=settings['warning_policy'],
            unjoinable_kinds=settings['unjoinable_wall_kinds'],
            transaction_name=settings['transaction_name'],
            is_cancelled=is_cancelled,
        )
    except UserCancelled:
        logger.info('join walls cancelled, no changes made')
        return CommandResult.CANCELLED, None
    except Exception as e:
        if is_cancellation(e):
            logger.info('join walls cancelled by host, no changes made')
            return CommandResult.CANCELLED, None
        logger.exception('join walls failed')
        log_exception('Join walls failed')
        return CommandResult.FAILED, None

    print_report(output, report, settings)
    return CommandResult.SUCCEEDED, report
