import pytest
from pydantic import ValidationError

from shinobi.core.component import Component


class Position(Component):
    x: float = 0.0
    y: float = 0.0
    tags: list[str] = []


def test_component_validation():
    with pytest.raises(ValidationError):
        Position(x={"invalid": "type"})


def test_component_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        Position(z=1.0)


def test_component_validates_assignment():
    p = Position()
    with pytest.raises(ValidationError):
        p.x = "not a number"


def test_clone_is_deep():
    p = Position(x=1, y=2, tags=["a"])
    copy = p.clone()

    copy.tags.append("b")
    copy.x = 5

    assert p.tags == ["a"]
    assert p.x == 1
    assert copy == Position(x=5, y=2, tags=["a", "b"])
