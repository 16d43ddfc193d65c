import gc

import pytest

from drills.tracker import LimitTracker, Messenger, Node


class RecordingMessenger(Messenger):
    def __init__(self):
        self.sent_messages = []

    def send(self, msg):
        self.sent_messages.append(msg)


def test_it_sends_an_over_75_percent_warning_message():
    messenger = RecordingMessenger()
    tracker = LimitTracker(messenger, 100)
    tracker.set_value(80)
    assert len(messenger.sent_messages) == 1
    assert messenger.sent_messages == ["Warning: You've used up over 75% of your quota!"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (50, []),
        (75, ["Warning: You've used up over 75% of your quota!"]),
        (90, ["Urgent warning: You've used up over 90% of your quota!"]),
        (100, ["Error: You are over your quota!"]),
        (150, ["Error: You are over your quota!"]),
    ],
)
def test_thresholds(value, expected):
    messenger = RecordingMessenger()
    tracker = LimitTracker(messenger, 100)
    tracker.set_value(value)
    assert messenger.sent_messages == expected
    assert tracker.value == value


def test_messages_accumulate():
    messenger = RecordingMessenger()
    tracker = LimitTracker(messenger, 10)
    tracker.set_value(8)
    tracker.set_value(2)
    tracker.set_value(10)
    assert messenger.sent_messages == [
        "Warning: You've used up over 75% of your quota!",
        "Error: You are over your quota!",
    ]


def test_zero_maximum():
    messenger = RecordingMessenger()
    tracker = LimitTracker(messenger, 0)
    tracker.set_value(0)
    assert messenger.sent_messages == []
    tracker.set_value(1)
    assert messenger.sent_messages == ["Error: You are over your quota!"]


def test_messenger_is_abstract():
    with pytest.raises(TypeError):
        Messenger()


def test_node_parent_link():
    leaf = Node(3)
    assert leaf.parent() is None
    branch = Node(5, [leaf])
    assert leaf.parent() is branch
    assert branch.children == [leaf]


def test_node_parent_does_not_keep_parent_alive():
    leaf = Node(3)
    branch = Node(5)
    branch.add_child(leaf)
    assert leaf.parent().value == 5
    del branch
    gc.collect()
    assert leaf.parent() is None
    assert leaf.value == 3