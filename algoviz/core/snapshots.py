"""
Snapshot value types for the data structures being animated.

Arrays and stack/queue buffers are plain lists of numbers, copied into every
mutation-bearing event (where they freeze into tuples). Trees are frozen
dataclasses so an emitted snapshot can never alias the working copy a
producer is mutating.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .errors import SnapshotError

Number = Union[int, float]


def coerce_number(raw: Any) -> Optional[Number]:
    """
    Parse user input as a number.

    Accepts ints, finite floats and numeric strings. Returns None for
    anything else (booleans, NaN, infinities, None, non-numeric text).
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return raw if math.isfinite(raw) else None
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return None
        return value if math.isfinite(value) else None
    return None


def coerce_array(values: Optional[Iterable[Any]]) -> Optional[List[Number]]:
    """
    Copy an input sequence as a list of numbers.

    Returns None when any element is not numeric. None input is an empty array.
    """
    out: List[Number] = []
    for raw in values or []:
        num = coerce_number(raw)
        if num is None:
            return None
        out.append(num)
    return out


@dataclass(frozen=True)
class TreeNode:
    id: int
    key: Number
    left: Optional[int] = None
    right: Optional[int] = None
    parent: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "left": self.left,
            "right": self.right,
            "parent": self.parent,
        }


@dataclass(frozen=True)
class TreeSnapshot:
    """
    Immutable binary search tree snapshot.

    Fields:
        root_id: Id of the parentless node, or None for an empty tree
        nodes: Nodes ordered by id
        next_id: Id the next inserted node receives; only ever grows, so
            ids are not reused after deletions
    """
    root_id: Optional[int] = None
    nodes: Tuple[TreeNode, ...] = field(default_factory=tuple)
    next_id: int = 0

    @staticmethod
    def empty() -> "TreeSnapshot":
        return TreeSnapshot()

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, node_id: Optional[int]) -> Optional[TreeNode]:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    @property
    def root(self) -> Optional[TreeNode]:
        return self.node(self.root_id)

    def keys_in_order(self) -> List[Number]:
        """In-order traversal of keys."""
        by_id = {n.id: n for n in self.nodes}
        out: List[Number] = []
        stack: List[TreeNode] = []
        cur = by_id.get(self.root_id)
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = by_id.get(cur.left)
            cur = stack.pop()
            out.append(cur.key)
            cur = by_id.get(cur.right)
        return out

    def validate(self) -> None:
        """
        Check the structural invariants.

        Raises:
            SnapshotError: On non-numeric keys, dangling links, a wrong root,
                mismatched parent pointers, nodes unreachable from the root,
                ids at or above next_id, or BST ordering violations
        """
        by_id = {n.id: n for n in self.nodes}
        if len(by_id) != len(self.nodes):
            raise SnapshotError("duplicate node ids")
        if self.nodes and max(by_id) >= self.next_id:
            raise SnapshotError("next_id must exceed every node id")
        for n in self.nodes:
            if coerce_number(n.key) is None or isinstance(n.key, str):
                raise SnapshotError(f"node {n.id} has a non-numeric key {n.key!r}")

        roots = [n.id for n in self.nodes if n.parent is None]
        if not self.nodes:
            if self.root_id is not None:
                raise SnapshotError("empty tree with a root_id")
            return
        if roots != [self.root_id]:
            raise SnapshotError(f"root_id {self.root_id} does not match parentless nodes {roots}")

        for n in self.nodes:
            for child_id in (n.left, n.right):
                if child_id is None:
                    continue
                child = by_id.get(child_id)
                if child is None:
                    raise SnapshotError(f"node {n.id} links to missing node {child_id}")
                if child.parent != n.id:
                    raise SnapshotError(f"node {child_id} does not point back to parent {n.id}")
            if n.parent is not None:
                parent = by_id.get(n.parent)
                if parent is None or n.id not in (parent.left, parent.right):
                    raise SnapshotError(f"node {n.id} is not a child of its parent {n.parent}")

        reached = self._check_order(by_id)
        if reached != len(self.nodes):
            raise SnapshotError(f"{len(self.nodes) - reached} nodes are not reachable from the root")

    def _check_order(self, by_id: Dict[int, TreeNode]) -> int:
        """Walk from the root; return the number of nodes reached."""
        # left subtree < key <= right subtree
        reached = 0
        pending = [(self.root_id, None, None)]
        while pending:
            node_id, low, high = pending.pop()
            if node_id is None:
                continue
            n = by_id[node_id]
            if (low is not None and n.key < low) or (high is not None and n.key >= high):
                raise SnapshotError(f"node {n.id} breaks BST ordering")
            reached += 1
            pending.append((n.left, low, n.key))
            pending.append((n.right, n.key, high))
        return reached

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root_id": self.root_id,
            "nodes": [n.to_dict() for n in self.nodes],
            "next_id": self.next_id,
        }

    @staticmethod
    def from_dict(data: Optional[Mapping[str, Any]]) -> "TreeSnapshot":
        """
        Build a snapshot from its dict form.

        Keys go through coerce_number, so "5" loads as 5. A missing next_id
        falls back to max(id) + 1. Links are taken as given; call validate()
        to check them.

        Raises:
            SnapshotError: If a node is missing id or key, an id is not an
                integer, or a key is not numeric
        """
        data = data or {}
        nodes = []
        for raw in data.get("nodes") or []:
            if "id" not in raw or "key" not in raw:
                raise SnapshotError(f"tree node needs id and key: {dict(raw)!r}")
            key = coerce_number(raw["key"])
            if key is None:
                raise SnapshotError(f"tree node {raw['id']!r} has a non-numeric key {raw['key']!r}")
            nodes.append(
                TreeNode(
                    id=_node_id(raw["id"]),
                    key=key,
                    left=_link(raw.get("left")),
                    right=_link(raw.get("right")),
                    parent=_link(raw.get("parent")),
                )
            )
        nodes.sort(key=lambda n: n.id)
        next_id = data.get("next_id")
        if next_id is None:
            next_id = nodes[-1].id + 1 if nodes else 0
        return TreeSnapshot(
            root_id=_link(data.get("root_id")),
            nodes=tuple(nodes),
            next_id=_node_id(next_id),
        )


def _node_id(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise SnapshotError(f"tree ids must be integers, got {raw!r}")
    return raw


def _link(raw: Any) -> Optional[int]:
    return None if raw is None else _node_id(raw)
