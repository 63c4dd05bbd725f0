"""
Binary search tree producers.

Tree snapshots go in and come out in dict form:
    {"root_id": int|None, "nodes": [{id, key, left, right, parent}], "next_id": int}

Duplicate keys are routed to the right subtree. Node ids come from the
snapshot's next_id counter and are never reused after a delete. Every
producer validates the incoming tree first; a broken tree is a caller bug
and raises SnapshotError instead of producing a log.

Events:
- init:        { tree }
- setCurrent:  { id }                         focus a node
- compareNode: { id, key }                    compare key against node.key
- insertNode:  { id, key, parent_id, side, tree }
- updateTree:  { id, key, successor_id, tree }  after a delete
- found:       { id, key }
- notFound:    { key }
- clear:       {}
- error:       { message }
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from ..core.events import Event, EventRecorder, EventType, error_log
from ..core.snapshots import TreeNode, TreeSnapshot, coerce_number

TreeInput = Union[TreeSnapshot, Mapping[str, Any], None]

BST_SOURCE = (
    "def insert(root, key):",
    "    parent, side, cur = None, None, root",
    "    while cur is not None:",
    "        parent = cur",
    "        if key < cur.key:",
    "            side, cur = 'L', cur.left",
    "        else:",
    "            side, cur = 'R', cur.right",
    "    node = Node(key, parent=parent)",
    "    attach(parent, side, node)",
    "",
    "def search(root, key):",
    "    cur = root",
    "    while cur is not None:",
    "        if key == cur.key:",
    "            return cur",
    "        cur = cur.left if key < cur.key else cur.right",
    "    return None",
    "",
    "def delete(root, key):",
    "    node = search(root, key)",
    "    if node is None:",
    "        return root",
    "    if node.left and node.right:",
    "        succ = node.right",
    "        while succ.left:",
    "            succ = succ.left",
    "        node.key = succ.key",
    "        node = succ",
    "    child = node.left or node.right",
    "    replace(node, child)",
)


def load_tree(tree: TreeInput) -> TreeSnapshot:
    """
    Accept a TreeSnapshot, its dict form, or None (empty tree).

    Raises:
        SnapshotError: If the tree is structurally broken or holds
            non-numeric keys
    """
    snapshot = tree if isinstance(tree, TreeSnapshot) else TreeSnapshot.from_dict(tree)
    snapshot.validate()
    return snapshot


class _WorkingTree:
    """
    Mutable copy of a snapshot, private to one producer call.

    Nothing handed out by freeze() shares structure with the working nodes.
    """

    def __init__(self, snapshot: TreeSnapshot) -> None:
        self.root_id = snapshot.root_id
        self.next_id = snapshot.next_id
        self.nodes: Dict[int, Dict[str, Any]] = {n.id: n.to_dict() for n in snapshot.nodes}

    def get(self, node_id: Optional[int]) -> Optional[Dict[str, Any]]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def add(self, key: Any, parent_id: Optional[int]) -> int:
        node_id = self.next_id
        self.next_id += 1
        self.nodes[node_id] = {"id": node_id, "key": key, "left": None, "right": None, "parent": parent_id}
        return node_id

    def unlink(self, node_id: int) -> None:
        """Remove a node with at most one child, reattaching that child to the parent."""
        node = self.nodes[node_id]
        child_id = node["left"] if node["left"] is not None else node["right"]
        parent_id = node["parent"]

        if child_id is not None:
            self.nodes[child_id]["parent"] = parent_id
        if parent_id is None:
            self.root_id = child_id
        else:
            parent = self.nodes[parent_id]
            if parent["left"] == node_id:
                parent["left"] = child_id
            else:
                parent["right"] = child_id
        del self.nodes[node_id]

    def freeze(self) -> TreeSnapshot:
        return TreeSnapshot(
            root_id=self.root_id,
            nodes=tuple(TreeNode(**self.nodes[i]) for i in sorted(self.nodes)),
            next_id=self.next_id,
        )


def bst_init(tree: TreeInput = None) -> List[Event]:
    """One-event log that draws the starting tree."""
    snapshot = load_tree(tree)
    return [Event(t=0, type=EventType.INIT, payload={"tree": snapshot.to_dict(), "line": 1})]


def bst_insert(tree: TreeInput, raw_key: Any) -> List[Event]:
    """
    Insert a key, descending from the root.

    Each visited node yields setCurrent + compareNode. The terminal
    insertNode carries the whole post-insert tree, followed by clear.
    """
    key = coerce_number(raw_key)
    if key is None:
        return error_log("Enter a number to insert.")

    work = _WorkingTree(load_tree(tree))
    rec = EventRecorder()

    parent_id = None
    side = None
    cur_id = work.root_id
    while cur_id is not None:
        rec.emit(EventType.SET_CURRENT, id=cur_id, line=3)
        cur = work.nodes[cur_id]
        rec.emit(EventType.COMPARE_NODE, id=cur_id, key=key, line=5)
        parent_id = cur_id
        if key < cur["key"]:
            side, cur_id = "L", cur["left"]
        else:
            side, cur_id = "R", cur["right"]

    node_id = work.add(key, parent_id)
    if parent_id is None:
        work.root_id = node_id
    elif side == "L":
        work.nodes[parent_id]["left"] = node_id
    else:
        work.nodes[parent_id]["right"] = node_id

    rec.emit(
        EventType.INSERT_NODE,
        id=node_id,
        key=key,
        parent_id=parent_id,
        side=side,
        tree=work.freeze().to_dict(),
        line=10,
    )
    rec.emit(EventType.CLEAR)
    return rec.events


def bst_search(tree: TreeInput, raw_key: Any) -> List[Event]:
    """
    Search for a key.

    Ends with found (the first matching node on the search path) or
    notFound. An empty tree yields a single notFound event.
    """
    key = coerce_number(raw_key)
    if key is None:
        return error_log("Enter a number to search.")

    snapshot = load_tree(tree)
    rec = EventRecorder()

    cur = snapshot.root
    while cur is not None:
        rec.emit(EventType.SET_CURRENT, id=cur.id, line=14)
        rec.emit(EventType.COMPARE_NODE, id=cur.id, key=key, line=15)
        if key == cur.key:
            rec.emit(EventType.FOUND, id=cur.id, key=key, line=16)
            return rec.events
        cur = snapshot.node(cur.left if key < cur.key else cur.right)

    rec.emit(EventType.NOT_FOUND, key=key, line=18)
    return rec.events


def bst_delete(tree: TreeInput, raw_key: Any) -> List[Event]:
    """
    Delete the first node on the search path whose key matches.

    A node with zero or one child is unlinked and its child takes its place.
    A node with two children takes its in-order successor's key; the
    successor is found by stepping to the right child and then left as far
    as possible (one setCurrent per hop) and is unlinked in turn. It has no
    left child, so the one-child rule applies.

    Exactly one updateTree event carries the final tree. A miss ends the
    log with notFound and leaves the tree untouched.
    """
    key = coerce_number(raw_key)
    if key is None:
        return error_log("Enter a number to delete.")

    work = _WorkingTree(load_tree(tree))
    rec = EventRecorder()

    target_id = None
    cur_id = work.root_id
    while cur_id is not None:
        rec.emit(EventType.SET_CURRENT, id=cur_id, line=21)
        cur = work.nodes[cur_id]
        rec.emit(EventType.COMPARE_NODE, id=cur_id, key=key, line=21)
        if key == cur["key"]:
            target_id = cur_id
            break
        cur_id = cur["left"] if key < cur["key"] else cur["right"]

    if target_id is None:
        rec.emit(EventType.NOT_FOUND, key=key, line=23)
        return rec.events

    target = work.nodes[target_id]
    successor_id = None
    if target["left"] is not None and target["right"] is not None:
        successor_id = target["right"]
        rec.emit(EventType.SET_CURRENT, id=successor_id, line=25)
        while work.nodes[successor_id]["left"] is not None:
            successor_id = work.nodes[successor_id]["left"]
            rec.emit(EventType.SET_CURRENT, id=successor_id, line=27)
        target["key"] = work.nodes[successor_id]["key"]
        work.unlink(successor_id)
    else:
        work.unlink(target_id)

    rec.emit(
        EventType.UPDATE_TREE,
        id=target_id,
        key=key,
        successor_id=successor_id,
        tree=work.freeze().to_dict(),
        line=31,
    )
    rec.emit(EventType.CLEAR)
    return rec.events


def bst_op(tree: TreeInput, action: str, key: Any = None) -> List[Event]:
    """Dispatch insert / search / delete by name."""
    if action == "insert":
        return bst_insert(tree, key)
    if action == "search":
        return bst_search(tree, key)
    if action == "delete":
        return bst_delete(tree, key)
    return error_log(f"Unknown action: {action}")


def tree_from_log(events: List[Event], fallback: TreeInput = None) -> TreeSnapshot:
    """
    The tree as it stands after a log: the last tree snapshot carried by
    any event, or the fallback when the log carries none (search, errors).
    """
    for ev in reversed(events):
        if "tree" in ev.payload:
            return TreeSnapshot.from_dict(ev.payload["tree"])
    return load_tree(fallback)
