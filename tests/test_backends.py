import pytest

from glyph.accessibility.backends import (
    AnnouncerBackend,
    Backend,
    NullAnnouncerBackend,
    NullBackend,
    default_announcer_backend,
    default_backend,
)
from glyph.accessibility.types import Node, Notification, Range, Role


def test_backend_interface_is_abstract():
    with pytest.raises(TypeError):
        Backend()


def test_announcer_backend_interface_is_abstract():
    with pytest.raises(TypeError):
        AnnouncerBackend()


def test_null_backend_leaves_nodes_untouched():
    nodes = {1: Node(id=1, role=Role.CONTAINER, text="Content", children=[2])}
    snapshot = {1: Node(id=1, role=Role.CONTAINER, text="Content", children=[2])}
    backend = NullBackend()
    backend.update_tree(nodes, 1)
    backend.set_focus(1)
    backend.post_notification(1, Notification.VALUE_CHANGED)
    backend.update_text_field(1, "test", Range(4, 0), 1)
    backend.flush()
    assert nodes == snapshot


def test_default_backend_is_null_backend():
    backend = default_backend()
    assert isinstance(backend, NullBackend)
    assert backend.flush() is None


def test_default_announcer_backend_discards_messages():
    backend = default_announcer_backend()
    assert isinstance(backend, NullAnnouncerBackend)
    assert backend.announce("hello") is None