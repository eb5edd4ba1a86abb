"""
Progress record tests: normalization, state, wire shape and text.
"""

import math

import pytest
from pydantic import ValidationError

from progresslogging import ROOT_ID, Progress, ProgressState, new_id


def test_defaults_describe_an_indeterminate_root_task():
    record = Progress(id=new_id())
    assert record.parent_id == ROOT_ID
    assert record.is_root
    assert record.fraction is None
    assert record.name == ""
    assert record.done is False
    assert record.state is ProgressState.INDETERMINATE


def test_int_fraction_becomes_float():
    record = Progress(id=new_id(), fraction=1)
    assert record.fraction == 1.0
    assert isinstance(record.fraction, float)


def test_nan_fraction_is_indeterminate():
    record = Progress(id=new_id(), fraction=math.nan)
    assert record.fraction is None
    assert record.state is ProgressState.INDETERMINATE


@pytest.mark.parametrize("value", [True, False, "0.5", "done"])
def test_non_numeric_fraction_is_rejected(value):
    with pytest.raises(ValidationError):
        Progress(id=new_id(), fraction=value)


def test_done_is_the_only_terminal_marker():
    over = Progress(id=new_id(), fraction=1.5)
    assert over.state is ProgressState.IN_PROGRESS
    assert not over.state.is_terminal()

    finished = Progress(id=new_id(), fraction=0.2, done=True)
    assert finished.state is ProgressState.DONE
    assert finished.state.is_terminal()


def test_record_is_frozen():
    record = Progress(id=new_id(), fraction=0.1)
    with pytest.raises(ValidationError):
        record.fraction = 0.2
    assert record.fraction == 0.1


def test_wire_shape_uses_parent_id_alias():
    record = Progress(id=new_id(), parent_id=new_id(), fraction=0.5, name="load")
    wire = record.to_wire()

    assert wire == {
        "id": str(record.id),
        "parentId": str(record.parent_id),
        "fraction": 0.5,
        "name": "load",
        "done": False,
    }
    assert Progress.from_wire(wire) == record


def test_wire_shape_of_indeterminate_record_has_null_fraction():
    record = Progress(id=new_id())
    assert record.to_wire()["fraction"] is None


def test_from_wire_accepts_field_name():
    parent = new_id()
    record = Progress.from_wire({"id": str(new_id()), "parent_id": str(parent)})
    assert record.parent_id == parent


@pytest.mark.parametrize(
    "kwargs, text",
    [
        ({"name": "load", "fraction": 0.5}, "load: 50%"),
        ({"name": "load", "fraction": 0.257}, "load: 25%"),
        ({"name": "load", "fraction": 0.999}, "load: 99%"),
        ({"name": "load"}, "load: ??%"),
        ({"fraction": 0.0}, "Progress: 0%"),
    ],
)
def test_text_of_root_record(kwargs, text):
    assert str(Progress(id=new_id(), **kwargs)) == text


def test_text_marks_child_records():
    child = Progress(id=new_id(), parent_id=new_id(), name="step", fraction=0.25)
    assert str(child) == "step (sub): 25%"
    assert str(Progress(id=new_id(), parent_id=new_id())) == "Progress (sub): ??%"
