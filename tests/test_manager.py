from glyph.accessibility.backends import Backend
from glyph.accessibility.manager import Manager
from glyph.accessibility.types import Notification, Range, Rect, Role


class RecordingBackend(Backend):
    def __init__(self):
        self.trees = []
        self.calls = []

    def update_tree(self, nodes, root_id):
        self.trees.append((nodes, root_id))

    def set_focus(self, node_id):
        self.calls.append(("focus", node_id))

    def post_notification(self, node_id, notification):
        self.calls.append(("notify", node_id, notification))

    def update_text_field(self, node_id, value, selection, cursor_line):
        self.calls.append(("field", node_id, value, selection, cursor_line))

    def flush(self):
        self.calls.append(("flush",))


def test_manager_lifecycle():
    backend = RecordingBackend()
    manager = Manager(backend)
    manager.add_text_node("Hello", Rect(0, 0, 100, 20))
    manager.commit()
    assert len(backend.trees) == 1
    nodes, root_id = backend.trees[0]
    root = nodes[root_id]
    assert root.role == Role.CONTAINER
    assert root.text == "Content"
    assert len(root.children) == 1
    child = nodes[root.children[0]]
    assert child.text == "Hello"
    assert child.role == Role.TEXT
    assert child.parent == root_id
    assert child.rect == Rect(0, 0, 100, 20)


def test_manager_text_field_node():
    backend = RecordingBackend()
    manager = Manager(backend)
    node_id = manager.create_text_field_node(Rect(10, 10, 200, 30))
    assert node_id > 0
    selection = Range(location=4, length=0)
    manager.update_text_field(node_id, "test", selection, 1)
    manager.set_focus(node_id)
    manager.post_notification(node_id, Notification.VALUE_CHANGED)
    manager.flush()
    manager.commit()
    assert backend.calls == [
        ("field", node_id, "test", selection, 1),
        ("focus", node_id),
        ("notify", node_id, Notification.VALUE_CHANGED),
        ("flush",),
    ]
    nodes, _ = backend.trees[0]
    assert nodes[node_id].role == Role.TEXT_FIELD


def test_manager_multiple_nodes():
    backend = RecordingBackend()
    manager = Manager(backend)
    manager.add_text_node("First", Rect())
    manager.add_text_node("Second", Rect())
    node_id = manager.create_text_field_node(Rect())
    assert node_id > 0
    manager.commit()
    nodes, root_id = backend.trees[0]
    assert len(nodes) == 4
    texts = [nodes[i].text for i in nodes[root_id].children]
    assert texts == ["First", "Second", ""]
    assert node_id in nodes[root_id].children


def test_node_ids_are_unique():
    manager = Manager(RecordingBackend())
    manager.add_text_node("a", Rect())
    first = manager.create_text_field_node(Rect())
    second = manager.create_text_field_node(Rect())
    assert first != second
    assert len(set(manager.nodes)) == len(manager.nodes)
    assert manager.root_id not in (first, second)


def test_commit_with_nothing_added_publishes_nothing():
    backend = RecordingBackend()
    manager = Manager(backend)
    manager.commit()
    assert backend.trees == []


def test_commit_resets_to_root_only():
    backend = RecordingBackend()
    manager = Manager(backend)
    manager.add_text_node("Hello", Rect())
    manager.commit()
    assert list(manager.nodes) == [manager.root_id]
    assert manager.nodes[manager.root_id].children == []


def test_published_tree_survives_reset():
    backend = RecordingBackend()
    manager = Manager(backend)
    manager.add_text_node("Hello", Rect())
    manager.commit()
    manager.add_text_node("Again", Rect())
    nodes, root_id = backend.trees[0]
    assert [nodes[i].text for i in nodes[root_id].children] == ["Hello"]


def test_default_backend_accepts_all_calls():
    manager = Manager()
    node_id = manager.create_text_field_node(Rect())
    manager.update_text_field(node_id, "x", Range(1, 0), 0)
    manager.flush()
    manager.commit()
    assert list(manager.nodes) == [manager.root_id]