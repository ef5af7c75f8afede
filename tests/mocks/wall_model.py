# -*- coding: utf-8 -*-
"""In-memory wall model implementing the walljoin model interface.

Usage:
    model = FakeModel([
        FakeWall(1, thickness_mm=450, level_id=10, box=((0, 0, 0), (10, 1, 3))),
        FakeWall(2, thickness_mm=500, level_id=20, box=((0, 0, 0), (10, 1, 3))),
    ])

Joins made inside a transaction only become visible in `joined` after a
commit; a rollback discards them.
"""
from typing import Dict, Iterable, List, Optional, Set

from walljoin.errors import ElementNotFound, JoinError, TransactionFailed
from walljoin.model import WALL_CATEGORY, BoundingBox


MM_PER_FOOT = 304.8


class FakeWall(object):
    def __init__(self, element_id, thickness_mm=450.0, level_id=1,
                 box=((0.0, 0.0, 0.0), (10.0, 1.0, 3.0)), kind="basic",
                 category=WALL_CATEGORY):
        self.id = element_id
        self.category = category
        self.kind = kind
        self._thickness = None if thickness_mm is None else float(thickness_mm) / MM_PER_FOOT
        self._level_id = level_id
        self._box = None if box is None else BoundingBox(box[0], box[1])
        self.bbox_calls: List[bool] = []

    def thickness(self):
        return self._thickness

    def base_level_id(self):
        return self._level_id

    def bounding_box(self, include_hidden=True):
        self.bbox_calls.append(include_hidden)
        return self._box

    def __repr__(self):
        return "FakeWall({0})".format(self.id)


class FakeTransaction(object):
    def __init__(self, model, name, warning_policy):
        self.model = model
        self.name = name
        self.warning_policy = warning_policy
        self.state = "started"
        self.pending: Set[frozenset] = set()

    def commit(self):
        if self.model.fail_commit:
            raise TransactionFailed(self.name, "RolledBack")
        self.model.joined.update(self.pending)
        self.state = "committed"

    def rollback(self):
        self.pending.clear()
        self.state = "rolled_back"


class FakeModel(object):
    def __init__(self, walls: Iterable[FakeWall] = ()):
        self._walls: Dict = {}
        for w in walls:
            self._walls[w.id] = w
        self.joined: Set[frozenset] = set()
        self.join_errors: Dict[frozenset, str] = {}
        self.join_calls: List[tuple] = []
        self.transactions: List[FakeTransaction] = []
        self.fail_commit = False
        self.query_count = 0

    @property
    def current(self) -> Optional[FakeTransaction]:
        if self.transactions and self.transactions[-1].state == "started":
            return self.transactions[-1]
        return None

    def query_elements(self, category, predicate=None):
        self.query_count += 1
        return [
            w for w in self._walls.values()
            if w.category == category and (predicate is None or predicate(w))
        ]

    def get_element(self, element_id):
        try:
            return self._walls[element_id]
        except KeyError:
            raise ElementNotFound(element_id)

    def remove(self, element_id):
        self._walls.pop(element_id, None)

    def reject_join(self, a_id, b_id, reason):
        self.join_errors[frozenset((a_id, b_id))] = reason

    def are_joined(self, a, b):
        key = frozenset((a.id, b.id))
        if key in self.joined:
            return True
        tx = self.current
        return tx is not None and key in tx.pending

    def join(self, a, b):
        self.join_calls.append((a.id, b.id))
        key = frozenset((a.id, b.id))
        if key in self.join_errors:
            raise JoinError(self.join_errors[key])
        tx = self.current
        if tx is None:
            raise RuntimeError("join outside of a transaction")
        tx.pending.add(key)

    def start_transaction(self, name, warning_policy):
        tx = FakeTransaction(self, name, warning_policy)
        self.transactions.append(tx)
        return tx
