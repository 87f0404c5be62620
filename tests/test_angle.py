import math

import pytest

from structgeom.angle import Angle, AngleState, HandSide
from structgeom.tolerance import Tolerance, get_tolerance, set_tolerance, tolerance_override

## unit tests for structgeom angles and tolerances

SAMPLES = [0.0, 0.5, -0.5, math.pi, -math.pi, 3.5, -3.5, 7.0, -7.0,
           2 * math.pi, -2 * math.pi, 100.0, -100.0, 1e-12, 6 * math.pi + 0.25]


class TestAngle:
    """unit tests for Angle"""

    def test_create(self):
        a = Angle(1.0)
        assert a.radians == 1.0
        assert Angle(a) == a
        assert math.isclose(Angle.from_degrees(180).radians, math.pi)
        with pytest.raises(ValueError):
            Angle('fish')
        with pytest.raises(AttributeError):
            a.foo = 2

    def test_parse(self):
        assert math.isclose(Angle.parse('0.5π').radians, math.pi / 2)
        assert math.isclose(Angle.parse('90°').radians, math.pi / 2)
        assert Angle.parse('1.25').radians == 1.25
        with pytest.raises(ValueError):
            Angle.parse('ninety')

    def test_states(self):
        assert Angle.UNDEFINED.state is AngleState.UNDEFINED
        assert Angle.MULTI.state is AngleState.MULTI
        assert Angle(0.3).state is AngleState.DEFINED
        assert Angle.UNDEFINED == Angle(math.nan)
        assert Angle.UNDEFINED != Angle.MULTI
        assert str(Angle.UNDEFINED) == ''
        assert str(Angle.MULTI) == 'Multi'

    @pytest.mark.parametrize('r', SAMPLES)
    def test_normalize_range(self, r):
        n = Angle(r).normalize().radians
        assert -math.pi < n <= math.pi
        k = (r - n) / (2 * math.pi)
        assert math.isclose(k, round(k), abs_tol=1e-9)

    @pytest.mark.parametrize('r', SAMPLES)
    def test_normalize_to_2pi_range(self, r):
        n = Angle(r).normalize_to_2pi().radians
        assert 0.0 <= n < 2 * math.pi
        k = (r - n) / (2 * math.pi)
        assert math.isclose(k, round(k), abs_tol=1e-9)

    @pytest.mark.parametrize('r', SAMPLES)
    def test_normalize_idempotent(self, r):
        once = Angle(r).normalize()
        assert once.normalize() == once
        once = Angle(r).normalize_to_2pi()
        assert once.normalize_to_2pi() == once

    def test_normalize_undefined(self):
        assert Angle.UNDEFINED.normalize().is_undefined
        assert Angle.MULTI.normalize().is_multi

    def test_classify(self):
        assert Angle.from_degrees(30).is_acute
        assert Angle.from_degrees(120).is_obtuse
        assert Angle.from_degrees(200).is_reflex
        assert Angle(1e-12).is_tiny
        assert not Angle.RIGHT.is_tiny

    def test_explement_and_supplement(self):
        a = Angle.from_degrees(30)
        assert math.isclose(a.explement().degrees, 330)
        assert math.isclose((-a).explement().degrees, -330)
        assert math.isclose(a.supplement().degrees, 150)
        assert math.isclose(Angle.from_degrees(150).smallest_to_straight().degrees, 30)

    def test_sign(self):
        assert Angle(-0.1).sign() == -1
        assert Angle(0.0).sign() == 1
        a = Angle.from_degrees(-90)
        assert math.isclose(a.to_sign(1).degrees, 270)
        assert a.to_sign(-1) is a
        assert a.relative_to_side(HandSide.LEFT) == -a
        assert a.relative_to_side(HandSide.RIGHT) == a

    def test_arithmetic(self):
        a = Angle(1.0)
        assert (a + 0.5).radians == 1.5
        assert (0.5 + a).radians == 1.5
        assert (2 - a).radians == 1.0
        assert (a * 3).radians == 3.0
        assert (a / 2).radians == 0.5
        assert abs(Angle(-2.0)).radians == 2.0
        assert Angle(1.0) < Angle(2.0)
        assert float(a) == 1.0

    def test_direction(self):
        d = Angle.RIGHT.direction()
        assert math.isclose(d.x, 0.0, abs_tol=1e-12)
        assert math.isclose(d.y, 1.0)


class TestTolerance:
    """unit tests for tolerance configuration"""

    def test_defaults(self):
        tol = get_tolerance()
        assert tol.distance == 1e-6
        assert math.isclose(tol.angle.degrees, 10)
        assert tol.layer == 0.5
        assert tol.distance_squared == pytest.approx(1e-12)

    def test_immutable(self):
        tol = Tolerance()
        with pytest.raises(AttributeError):
            tol.distance = 1.0
        assert tol.with_(distance=0.1).distance == 0.1
        assert tol.distance == 1e-6

    def test_override(self):
        before = get_tolerance()
        with tolerance_override(distance=0.01) as tol:
            assert get_tolerance() is tol
            assert tol.distance == 0.01
        assert get_tolerance() is before

    def test_set_rejects_other_types(self):
        with pytest.raises(ValueError):
            set_tolerance(0.001)
