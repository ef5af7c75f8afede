# -*- coding: utf-8 -*-
"""Revit implementation of the wall join model interface.

Wraps a Revit document so the host-independent core in `walljoin` can
query walls, join their geometry and run transactions with a warning
policy.
"""
from pyrevit import DB

from walljoin.errors import ElementNotFound, JoinError, TransactionFailed, UserCancelled
from walljoin.logging_setup import get_logger
from walljoin.model import WALL_CATEGORY, BoundingBox, WarningPolicy


logger = get_logger(__name__)

CANCELLATION_EXCEPTIONS = ("OperationCanceledException",)

_WALL_KIND_NAMES = ("Basic", "Curtain", "Stacked", "Unknown")


def element_id_value(eid):
    """Integer value of an ElementId (Value on Revit 2024+, IntegerValue before)."""
    if eid is None:
        return None
    value = getattr(eid, "Value", None)
    if value is None:
        value = getattr(eid, "IntegerValue", None)
    return int(value) if value is not None else None


def host_exception(exc):
    """The .NET exception behind a Python exception (IronPython wraps it)."""
    return getattr(exc, "clsException", None) or exc


def exception_message(exc):
    inner = host_exception(exc)
    msg = getattr(inner, "Message", None)
    if msg:
        return str(msg)
    return str(exc) or type(inner).__name__


def is_cancellation(exc):
    return type(host_exception(exc)).__name__ in CANCELLATION_EXCEPTIONS


def _xyz_tuple(pt):
    return (float(pt.X), float(pt.Y), float(pt.Z))


def wall_kind_name(kind):
    if kind is None:
        return None
    for name in _WALL_KIND_NAMES:
        member = getattr(DB.WallKind, name, None)
        if member is not None and kind == member:
            return name.lower()
    return str(kind).lower()


class RevitWall(object):
    """Element handle over a Revit wall (or any picked element)."""

    category = WALL_CATEGORY

    def __init__(self, element):
        self.element = element
        self.id = element_id_value(element.Id)

    @property
    def kind(self):
        try:
            wall_type = self.element.WallType
        except Exception:
            return None
        if wall_type is None:
            return None
        return wall_kind_name(getattr(wall_type, "Kind", None))

    def thickness(self):
        p = self.element.get_Parameter(DB.BuiltInParameter.WALL_ATTR_WIDTH_PARAM)
        if p is not None:
            try:
                return float(p.AsDouble())
            except Exception as e:
                logger.debug("wall %s width parameter unreadable, using Width: %s", self.id, e)
        width = getattr(self.element, "Width", None)
        return float(width) if width is not None else None

    def base_level_id(self):
        p = self.element.get_Parameter(DB.BuiltInParameter.WALL_BASE_CONSTRAINT)
        if p is not None:
            eid = p.AsElementId()
            if eid is not None and eid != DB.ElementId.InvalidElementId:
                return element_id_value(eid)
        return element_id_value(self.element.LevelId)

    def bounding_box(self, include_hidden=True):
        """Box from the full geometry when `include_hidden`, else the stored box.

        Geometry extraction is expensive; candidate tests use the stored box.
        """
        if not include_hidden:
            bb = self.element.get_BoundingBox(None)
            if bb is None:
                return None
            return BoundingBox(_xyz_tuple(bb.Min), _xyz_tuple(bb.Max))

        opts = DB.Options()
        opts.IncludeNonVisibleObjects = bool(include_hidden)
        geom = self.element.get_Geometry(opts)
        if geom is None:
            return None
        bb = geom.GetBoundingBox()
        if bb is None:
            return None
        return BoundingBox(_xyz_tuple(bb.Min), _xyz_tuple(bb.Max))

    def __repr__(self):
        return "RevitWall({0})".format(self.id)


def preprocess_failures(failures_accessor, policy):
    """Apply `policy` to the failures posted in a transaction."""
    result = DB.FailureProcessingResult.Continue
    if policy == WarningPolicy.SHOW:
        return result

    for f in failures_accessor.GetFailureMessages():
        severity = f.GetSeverity()
        if severity == DB.FailureSeverity.Warning:
            failures_accessor.DeleteWarning(f)
        elif policy == WarningPolicy.RESOLVE and severity == DB.FailureSeverity.Error:
            if failures_accessor.IsFailureResolutionPermitted(f):
                failures_accessor.ResolveFailure(f)
                result = DB.FailureProcessingResult.ProceedWithCommit
    return result


def make_failures_preprocessor(policy):
    class _WarningSwallower(DB.IFailuresPreprocessor):
        def PreprocessFailures(self, failuresAccessor):
            return preprocess_failures(failuresAccessor, policy)

    return _WarningSwallower()


class RevitTransaction(object):
    """Started Revit transaction with failure handling set from a policy."""

    def __init__(self, doc, name, warning_policy=WarningPolicy.RESOLVE):
        self.name = name
        self.policy = WarningPolicy.parse(warning_policy)
        self.transaction = DB.Transaction(doc, name)

        # options first, so a failure here leaves nothing started
        if self.policy != WarningPolicy.SHOW:
            opts = self.transaction.GetFailureHandlingOptions()
            opts = opts.SetFailuresPreprocessor(make_failures_preprocessor(self.policy))
            opts = opts.SetClearAfterRollback(True)
            self.transaction.SetFailureHandlingOptions(opts)

        self.transaction.Start()

    def commit(self):
        status = self.transaction.Commit()
        if status != DB.TransactionStatus.Committed:
            raise TransactionFailed(self.name, status)

    def rollback(self):
        if self.transaction.GetStatus() == DB.TransactionStatus.Started:
            self.transaction.RollBack()


class RevitModel(object):
    """Wall join model over one Revit document."""

    def __init__(self, doc):
        self.doc = doc

    def query_elements(self, category, predicate=None):
        if category != WALL_CATEGORY:
            raise ValueError("Unsupported category: {0}".format(category))

        collector = (
            DB.FilteredElementCollector(self.doc)
            .OfClass(DB.Wall)
            .WhereElementIsNotElementType()
        )
        out = []
        for wall in collector:
            element = RevitWall(wall)
            if predicate is None or predicate(element):
                out.append(element)
        return out

    def get_element(self, element_id):
        elem = self.doc.GetElement(DB.ElementId(int(element_id)))
        if elem is None or not getattr(elem, "IsValidObject", True):
            raise ElementNotFound(element_id)
        return RevitWall(elem)

    def are_joined(self, a, b):
        return bool(DB.JoinGeometryUtils.AreElementsJoined(self.doc, a.element, b.element))

    def join(self, a, b):
        try:
            DB.JoinGeometryUtils.JoinGeometry(self.doc, a.element, b.element)
        except Exception as e:
            if is_cancellation(e):
                raise UserCancelled(exception_message(e))
            raise JoinError(exception_message(e))

    def start_transaction(self, name, warning_policy=WarningPolicy.RESOLVE):
        return RevitTransaction(self.doc, name, warning_policy)
