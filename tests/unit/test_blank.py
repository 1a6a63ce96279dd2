from decimal import Decimal

import pytest

from testkit.blank import Blankable, is_blank, is_present, presence, register_blank


class EmptyRecord:
    def is_blank(self) -> bool:
        return True


class Unsaved:
    """Neither blank nor present until persisted."""

    def is_blank(self) -> bool:
        return False

    def is_present(self) -> bool:
        return False


class Queue:
    def __init__(self, size: int):
        self.size = size


@pytest.mark.parametrize(
    ("obj", "expected"),
    [
        (None, True),
        (False, True),
        (True, False),
        (0, False),
        (-1, False),
        (0.0, False),
        (Decimal("0"), False),
        ("", True),
        (" \n\t ", True),
        (" a ", False),
        (b"  ", True),
        (bytearray(b"x"), False),
        ([], True),
        ([None], False),
        ({}, True),
        ({"k": None}, False),
        (set(), True),
        (range(0), True),
        (object(), False),
    ],
)
def test_is_blank(obj, expected):
    assert is_blank(obj) is expected
    assert is_present(obj) is (not expected)


def test_blankable_objects_decide_for_themselves():
    assert isinstance(EmptyRecord(), Blankable)
    assert is_blank(EmptyRecord())
    assert not is_present(EmptyRecord())


def test_presence_need_not_negate_blankness():
    assert not is_blank(Unsaved())
    assert not is_present(Unsaved())


def test_classes_are_not_treated_as_blankable_instances():
    assert not is_blank(EmptyRecord)
    assert is_present(Unsaved)


def test_register_blank_adapter():
    @register_blank(Queue)
    def _(queue: Queue) -> bool:
        return queue.size == 0

    assert is_blank(Queue(0))
    assert is_present(Queue(3))


def test_presence():
    assert presence("name") == "name"
    assert presence("   ") is None
    assert presence([]) is None
    assert presence(0) == 0


class Attendance:
    """A record whose fields share the capability names."""

    def __init__(self, is_present: bool, is_blank: str):
        self.is_present = is_present
        self.is_blank = is_blank


def test_plain_attributes_do_not_make_objects_self_deciding():
    record = Attendance(is_present=False, is_blank="")
    assert not is_blank(record)
    assert is_present(record)
    assert presence(record) is record
