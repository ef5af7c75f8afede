# -*- coding: utf-8 -*-
"""Exceptions raised by the wall join tools.

Only `JoinError` is recovered locally (per wall pair). Everything else
unwinds through the open transaction, which rolls back, up to the command
handler that turns it into a command result.
"""


class WallJoinError(Exception):
    """Base class for wall join errors."""


class UserCancelled(WallJoinError):
    """The user aborted an interactive step or the whole operation."""


class ElementNotFound(WallJoinError):
    """The referenced element no longer exists in the model."""

    def __init__(self, element_id):
        self.element_id = element_id
        super(ElementNotFound, self).__init__(
            "Element {0} not found in the model".format(element_id)
        )


class JoinError(WallJoinError):
    """The host rejected a geometry join for one pair of walls."""

    def __init__(self, reason):
        self.reason = reason
        super(JoinError, self).__init__(reason)


class TransactionFailed(WallJoinError):
    """The host refused to commit the transaction."""

    def __init__(self, name, status=None):
        self.name = name
        self.status = status
        super(TransactionFailed, self).__init__(
            "Transaction '{0}' was not committed (status: {1})".format(name, status)
        )
