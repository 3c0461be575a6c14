"""Tests for the Rectangle model."""

from selectorkit.model import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_get_area(self):
        assert Rectangle(10, 20).get_area() == 200

    def test_area_property(self):
        assert Rectangle(3, 4).area == 12

    def test_area_follows_mutation(self):
        r = Rectangle(2, 5)
        r.width = 7
        assert r.get_area() == 35

    def test_no_bounds_checking(self):
        assert Rectangle(-2, 3).get_area() == -6
        assert Rectangle(0, 9).get_area() == 0

    def test_float_sides(self):
        assert Rectangle(1.5, 2).get_area() == 3.0

    def test_equality(self):
        assert Rectangle(1, 2) == Rectangle(1, 2)
