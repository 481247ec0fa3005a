"""Platform interfaces for the accessibility tree and spoken announcements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from glyph.accessibility.types import Node, Notification, Range


class Backend(ABC):
    """Receives accessibility tree updates for a platform screen reader."""

    @abstractmethod
    def update_tree(self, nodes: Mapping[int, Node], root_id: int) -> None:
        """Replace the published tree with ``nodes`` rooted at ``root_id``."""

    @abstractmethod
    def set_focus(self, node_id: int) -> None:
        """Move accessibility focus to ``node_id``."""

    @abstractmethod
    def post_notification(self, node_id: int, notification: Notification) -> None:
        """Report a state change on ``node_id``."""

    @abstractmethod
    def update_text_field(
        self, node_id: int, value: str, selection: Range, cursor_line: int
    ) -> None:
        """Publish the value, selection and cursor line of a text field."""

    @abstractmethod
    def flush(self) -> None:
        """Process pending platform events."""


class AnnouncerBackend(ABC):
    """Speaks announcements through a platform screen reader."""

    @abstractmethod
    def announce(self, message: str) -> None:
        """Post ``message`` to the screen reader."""


class NullBackend(Backend):
    """A backend with no platform service behind it.

    It keeps the most recently published state in memory so that it can be
    inspected, but never talks to a screen reader.
    """

    def __init__(self) -> None:
        self.nodes: dict[int, Node] = {}
        self.root_id: int = 0
        self.focused: int | None = None
        self.text_fields: dict[int, tuple[str, Range, int]] = {}
        self.pending: list[tuple[int, Notification]] = []

    def update_tree(self, nodes: Mapping[int, Node], root_id: int) -> None:
        # The caller may clear its mapping afterwards, so keep a copy.
        self.nodes = dict(nodes)
        self.root_id = root_id

    def set_focus(self, node_id: int) -> None:
        self.focused = node_id

    def post_notification(self, node_id: int, notification: Notification) -> None:
        self.pending.append((node_id, notification))

    def update_text_field(
        self, node_id: int, value: str, selection: Range, cursor_line: int
    ) -> None:
        self.text_fields[node_id] = (value, selection, cursor_line)

    def flush(self) -> None:
        self.pending.clear()


class NullAnnouncerBackend(AnnouncerBackend):
    """An announcer backend that speaks nothing and remembers the last message."""

    def __init__(self) -> None:
        self.last_message: str | None = None

    def announce(self, message: str) -> None:
        self.last_message = message


def default_backend() -> Backend:
    """Return the accessibility backend for the current platform."""
    return NullBackend()


def default_announcer_backend() -> AnnouncerBackend:
    """Return the announcer backend for the current platform."""
    return NullAnnouncerBackend()