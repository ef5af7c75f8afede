# -*- coding: utf-8 -*-
"""Transaction context manager over the model interface."""
from walljoin.logging_setup import get_logger
from walljoin.model import WarningPolicy


logger = get_logger(__name__)


def tx(model, name, warning_policy=WarningPolicy.RESOLVE):
    """All-or-nothing transaction scope.

    Commits on normal exit. Any exception, including a failed commit,
    rolls the transaction back and propagates.

    Usage:
        with tx(model, 'Join walls'):
            ...
    """
    policy = WarningPolicy.parse(warning_policy)

    class _Tx(object):
        def __init__(self):
            self.transaction = None

        def __enter__(self):
            self.transaction = model.start_transaction(name, policy)
            logger.debug("transaction started name=%s policy=%s", name, policy)
            return self.transaction

        def __exit__(self, exc_type, exc, tb):
            t = self.transaction
            if exc_type:
                logger.info("rolling back transaction name=%s error=%s", name, exc)
                _rollback(t)
                return False

            try:
                t.commit()
            except Exception:
                _rollback(t)
                raise
            logger.debug("transaction committed name=%s", name)
            return False

    return _Tx()


def _rollback(transaction):
    try:
        transaction.rollback()
    except Exception:
        logger.exception("rollback failed")
