import math
from fractions import Fraction

import pytest

from geoprim3d.diagnostics import RecordingSink, Severity, use_sink
from geoprim3d.errors import DegenerateState, InvalidArgument
from geoprim3d.vector import Vector3
## unit tests for geoprim3d vector.py


def vclose(a, b, tol=1e-9):
    return a.distance_to(b) < tol


class TestCreate:
    """construction and validation"""

    def test_create(self):
        a = Vector3(1, 2, 3)
        assert (a.x, a.y, a.z) == (1.0, 2.0, 3.0)
        assert isinstance(a.x, float)
        assert Vector3.origin() == Vector3(0, 0, 0)

    def test_create_result(self):
        res = Vector3.create(1.5, -2.0, 0.25)
        assert res.ok
        assert res.unwrap() == Vector3(1.5, -2.0, 0.25)

    @pytest.mark.parametrize('bad', [math.nan, math.inf, -math.inf, None, '1', True,
                                     10**400, -10**400, Fraction(10**400)])
    def test_create_rejects(self, bad):
        res = Vector3.create(bad, 0, 0)
        assert not res
        assert isinstance(res.error, InvalidArgument)
        with pytest.raises(InvalidArgument):
            res.unwrap()
        with pytest.raises(InvalidArgument):
            Vector3(0, 0, bad)

    def test_exact_reals_that_fit(self):
        a = Vector3(Fraction(1, 4), 10**300, -7)
        assert a == Vector3(0.25, 1e300, -7.0)
        assert isinstance(a.y, float)

    @pytest.mark.parametrize('huge', [10**400, Fraction(10**400)])
    def test_operations_reject_overflowing_arguments(self, huge):
        a = Vector3(1, 0, 0)
        with pytest.raises(InvalidArgument):
            a.scale(huge)
        with pytest.raises(InvalidArgument):
            a.translate(huge, 0, 0)
        for name in ('rotate_x', 'rotate_y', 'rotate_z'):
            with pytest.raises(InvalidArgument):
                getattr(a, name)(huge)

    def test_immutable(self):
        a = Vector3(1, 2, 3)
        with pytest.raises(AttributeError):
            a.x = 5.0


class TestValueSemantics:

    def test_equality_is_exact(self):
        assert Vector3(1, 2, 3) == Vector3(1.0, 2.0, 3.0)
        assert Vector3(0.1 + 0.2, 0, 0) != Vector3(0.3, 0, 0)

    def test_hash_consistent(self):
        assert hash(Vector3(1, 2, 3)) == hash(Vector3(1.0, 2.0, 3.0))
        assert len({Vector3(1, 2, 3), Vector3(1, 2, 3), Vector3(3, 2, 1)}) == 2

    def test_format(self):
        assert repr(Vector3(1, 2.5, -3)) == 'Vector3(1.000000, 2.500000, -3.000000)'
        assert str(Vector3(1, 2, 3)) == repr(Vector3(1, 2, 3))

    def test_negative_zero_renders_as_zero(self):
        a = Vector3(-0.0, 0.0, 0.0)
        b = Vector3(0.0, 0.0, 0.0)
        assert a == b
        assert repr(a) == repr(b) == 'Vector3(0.000000, 0.000000, 0.000000)'

    def test_iter(self):
        assert tuple(Vector3(1, 2, 3)) == (1.0, 2.0, 3.0)
        assert Vector3(4, 5, 6).as_tuple() == (4.0, 5.0, 6.0)


class TestOperations:

    def test_vect(self):
        a = Vector3(5, 0, 0)
        b = Vector3(0, 5, 0)
        c = Vector3(-3, -3, 0)
        d = Vector3(1, 1, 0)
        assert a.magnitude() == 5.0
        assert a.add(b) == Vector3(5, 5, 0)
        assert a.subtract(b) == Vector3(5, -5, 0)
        assert a.dot(b) == 0.0
        assert d.dot(c) == -6.0
        assert a.cross(b) == Vector3(0, 0, 25)
        assert b.cross(a) == Vector3(0, 0, -25)
        assert math.isclose(a.distance_to(b), math.sqrt(50))

    def test_operators(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)
        assert a*2 == 2*a == Vector3(2, 4, 6)
        with pytest.raises(TypeError):
            a + (1, 2, 3)

    def test_magnitude(self):
        assert Vector3(0, 0, 0).magnitude() == 0.0
        assert Vector3(3, 4, 12).magnitude() == 13.0
        for v in [(1e-300, 0, 0), (-2, 0.5, 7), (0, -1e-8, 0)]:
            assert Vector3(*v).magnitude() > 0.0

    def test_cross_anticommutes(self):
        pairs = [(Vector3(1, 2, 3), Vector3(-4, 0.5, 9)),
                 (Vector3(0.1, -0.7, 2.2), Vector3(3, 3, -1)),
                 (Vector3(1, 0, 0), Vector3(0, 1, 0))]
        for a, b in pairs:
            assert a.cross(b) == b.cross(a).scale(-1)

    def test_scale_rejects_non_finite(self):
        with pytest.raises(InvalidArgument):
            Vector3(1, 1, 1).scale(math.inf)
        with pytest.raises(InvalidArgument):
            Vector3(1, 1, 1).scale(None)

    def test_overflow_is_rejected(self):
        big = Vector3(1e308, 0, 0)
        with pytest.raises(InvalidArgument):
            big.scale(10)

    def test_null_argument(self):
        with pytest.raises(InvalidArgument):
            Vector3(1, 1, 1).add(None)
        with pytest.raises(InvalidArgument):
            Vector3(1, 1, 1).dot((1, 1, 1))


class TestNormalize:

    def test_unit_length_same_direction(self):
        for v in [Vector3(3, 4, 0), Vector3(-1, 2, -7), Vector3(1e-5, 0, 2e-5)]:
            u = v.normalize()
            assert math.isclose(u.magnitude(), 1.0, rel_tol=1e-12)
            assert u.dot(v) > 0

    def test_zero_vector_fails(self):
        sink = RecordingSink()
        with use_sink(sink):
            with pytest.raises(DegenerateState):
                Vector3(0, 0, 0).normalize()
        assert sink.messages(Severity.SEVERE)

    def test_tiny_vector_warns(self):
        sink = RecordingSink()
        with use_sink(sink):
            u = Vector3(1e-14, 0, 0).normalize()
        assert math.isclose(u.x, 1.0)
        warnings = sink.messages(Severity.WARNING)
        assert len(warnings) == 1
        assert 'unstable' in warnings[0]

    def test_normal_vector_does_not_warn(self):
        sink = RecordingSink()
        with use_sink(sink):
            Vector3(1, 1, 1).normalize()
        assert not sink.messages(Severity.WARNING)


class TestRotation:

    def test_quarter_turns(self):
        q = math.pi/2
        assert vclose(Vector3(0, 1, 0).rotate_x(q), Vector3(0, 0, 1))
        assert vclose(Vector3(0, 0, 1).rotate_y(q), Vector3(1, 0, 0))
        assert vclose(Vector3(1, 0, 0).rotate_z(q), Vector3(0, 1, 0))

    def test_rotation_is_about_origin(self):
        p = Vector3(5, 1, 0)
        assert vclose(p.rotate_z(math.pi), Vector3(-5, -1, 0))

    def test_round_trip(self):
        vectors = [Vector3(1, 2, 3), Vector3(-4.5, 0, 7), Vector3(0, 0, 0), Vector3(1e3, -1e-3, 42)]
        angles = [0.3, -1.7, math.pi, 12.5, -100.0]
        for v in vectors:
            for ang in angles:
                for axis in ('x', 'y', 'z'):
                    rot = getattr(v, 'rotate_' + axis)(ang)
                    back = getattr(rot, 'rotate_' + axis)(-ang)
                    assert vclose(back, v, tol=1e-9*max(1.0, v.magnitude()))

    def test_rotation_preserves_length(self):
        v = Vector3(3, -4, 12)
        assert math.isclose(v.rotate_x(0.4).rotate_y(1.1).rotate_z(-2).magnitude(), 13.0)

    def test_non_finite_angle(self):
        for name in ('rotate_x', 'rotate_y', 'rotate_z'):
            with pytest.raises(InvalidArgument):
                getattr(Vector3(1, 0, 0), name)(math.nan)


class TestTranslate:

    def test_translate(self):
        assert Vector3(1, 2, 3).translate(1, -2, 0.5) == Vector3(2, 0, 3.5)

    def test_identity(self):
        v = Vector3(1.25, -3, 9)
        assert v.translate(0, 0, 0) == v
        assert v.rotate_x(0) == v

    def test_non_finite_delta(self):
        with pytest.raises(InvalidArgument):
            Vector3(0, 0, 0).translate(0, math.inf, 0)
