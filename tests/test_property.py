import pytest

from softy.property import Property


class _Box:
    def __init__(self, value):
        self.value = value

    def get(self):
        return self.value

    def set(self, value):
        self.value = value


def _prop(value):
    box = _Box(value)
    return box, Property(box.get, box.set)


def test_getter():
    prop = Property(lambda: 1)
    assert prop.get() == 1


def test_setter():
    box, prop = _prop(0)
    prop.set(2)
    assert box.value == 2


def test_add():
    _, prop = _prop(0)
    assert prop + 42 == 42


def test_subtract():
    _, prop = _prop(0)
    assert prop - 42 == -42


def test_multiply():
    _, prop = _prop(0)
    assert prop * 42 == 0


def test_divide():
    _, prop = _prop(1.0)
    assert prop / 2.0 == pytest.approx(0.5)


def test_modulo():
    _, prop = _prop(45)
    assert prop % 42 == 3


def test_greater_than_equal():
    _, prop = _prop(45)
    assert (prop >= 42) is True


def test_greater_than_equal_two_properties():
    _, p_prop = _prop(45)
    _, q_prop = _prop(42)
    assert (p_prop >= q_prop) is True
    assert (q_prop >= p_prop) is False


def test_reflected_operators():
    _, prop = _prop(4)
    assert 10 - prop == 6
    assert 10 + prop == 14
    assert 3 * prop == 12
    assert 10 % prop == 2
    assert 8 / prop == 2


def test_negation():
    _, prop = _prop(7)
    assert -prop == -7


def test_in_place_operators_write_back():
    box, prop = _prop(10)
    prop += 5
    assert box.value == 15
    prop -= 3
    assert box.value == 12
    prop *= 2
    assert box.value == 24
    prop %= 10
    assert box.value == 4
    prop /= 2
    assert box.value == 2


def test_comparisons():
    _, prop = _prop(5)
    assert prop < 6
    assert prop <= 5
    assert prop > 4
    assert prop == 5


def test_read_only_set_raises():
    prop = Property(lambda: 1)
    with pytest.raises(AttributeError):
        prop.set(2)


def test_missing_getter_raises():
    with pytest.raises(ValueError):
        Property(None)


def test_set_property_replaces_accessors():
    box, prop = _prop(1)
    other = _Box(9)
    prop.set_property(other.get, other.set)
    prop.set(3)
    assert other.value == 3
    assert box.value == 1
    assert prop.get() == 3