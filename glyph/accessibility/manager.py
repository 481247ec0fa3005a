"""Lifecycle of the accessibility tree published to a platform backend."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from glyph.accessibility.backends import Backend, default_backend
from glyph.accessibility.types import Node, Notification, Range, Rect, Role


class Manager:
    """Accumulates accessibility nodes for a frame and publishes them on commit."""

    def __init__(self, backend: Backend | None = None) -> None:
        self.backend = backend if backend is not None else default_backend()
        self._nodes: dict[int, Node] = {}
        self._next_id = 1
        self._root_id = 0

    @property
    def nodes(self) -> Mapping[int, Node]:
        """A read-only view of the nodes gathered so far."""
        return MappingProxyType(self._nodes)

    @property
    def root_id(self) -> int:
        """The id of the current root node."""
        return self._root_id

    def add_text_node(self, text: str, rect: Rect) -> None:
        """Add a text node under the root."""
        self._add_child(Role.TEXT, rect, text)

    def create_text_field_node(self, rect: Rect) -> int:
        """Add an editable text field under the root and return its id."""
        return self._add_child(Role.TEXT_FIELD, rect, "")

    def update_text_field(
        self, node_id: int, value: str, selection: Range, cursor_line: int
    ) -> None:
        """Publish the state of a text field through the backend."""
        self.backend.update_text_field(node_id, value, selection, cursor_line)

    def set_focus(self, node_id: int) -> None:
        """Tell the backend that focus moved to ``node_id``."""
        self.backend.set_focus(node_id)

    def post_notification(self, node_id: int, notification: Notification) -> None:
        """Post an accessibility notification for ``node_id``."""
        self.backend.post_notification(node_id, notification)

    def flush(self) -> None:
        """Let the backend process pending platform events."""
        self.backend.flush()

    def commit(self) -> None:
        """Publish the accumulated tree and start a fresh one."""
        if not self._nodes:
            return
        self.backend.update_tree(dict(self._nodes), self._root_id)
        self._reset()

    def _add_child(self, role: Role, rect: Rect, text: str) -> int:
        if not self._nodes:
            self._reset()
        node_id = self._allocate_id()
        self._nodes[node_id] = Node(
            id=node_id, role=role, rect=rect, text=text, parent=self._root_id
        )
        root = self._nodes.get(self._root_id)
        if root is not None:
            root.children.append(node_id)
        return node_id

    def _reset(self) -> None:
        self._nodes = {}
        self._next_id = 1
        self._root_id = self._allocate_id()
        self._nodes[self._root_id] = Node(
            id=self._root_id, role=Role.CONTAINER, text="Content"
        )

    def _allocate_id(self) -> int:
        node_id = self._next_id
        self._next_id += 1
        return node_id