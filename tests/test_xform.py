import pytest

from brepkernel.xform import Rotation, Scale, Transform, Translation
## unit tests for brepkernel xform.py


class TestTransform:
    """unit tests for brepkernel transform operations"""

    def test_identity(self):
        I = Transform()
        bar = Transform([[1, 0, 0, 1], [0, 1, 0, 2], [0, 0, 1, 3], [0, 0, 0, 1]])
        assert I.mul(bar) == bar
        assert bar.mul(I) == bar
        assert Transform(bar) == bar
        assert I.transform_point((1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)

    def test_mul_order(self):
        T = Translation((1, 0, 0))
        S = Scale(2.0)
        # scale first, then translate
        assert T.mul(S).transform_point((1.0, 1.0, 1.0)) == (3.0, 2.0, 2.0)
        # translate first, then scale
        assert S.mul(T).transform_point((1.0, 1.0, 1.0)) == (4.0, 2.0, 2.0)

    def test_bad_init(self):
        with pytest.raises(ValueError):
            Transform([[1, 2, 3]])
        with pytest.raises(ValueError):
            Transform([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 'x']])
        with pytest.raises(ValueError):
            Transform(42)


class TestTranslation:
    """translations move points but not vectors"""

    def test_point(self):
        T = Translation((1, 2, 3))
        assert T.transform_point((1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)

    def test_vector(self):
        T = Translation((1, 2, 3))
        assert T.transform_vector((1.0, 1.0, 1.0)) == (1.0, 1.0, 1.0)

    def test_inverse(self):
        T = Translation((1, 2, 3))
        Ti = Translation((1, 2, 3), inverse=True)
        assert Ti.mul(T).transform_point((5.0, 6.0, 7.0)) == (5.0, 6.0, 7.0)


class TestRotation:

    def test_quarter_turn(self):
        R = Rotation((0, 0, 1), 90)
        assert R.transform_point((1.0, 0.0, 0.0)) == pytest.approx((0.0, 1.0, 0.0))
        assert R.transform_vector((0.0, 1.0, 0.0)) == pytest.approx((-1.0, 0.0, 0.0))

    def test_inverse(self):
        R = Rotation((1, 1, 0), 33)
        Ri = Rotation((1, 1, 0), 33, inverse=True)
        assert Ri.mul(R).transform_point((1.0, 2.0, 3.0)) == pytest.approx((1.0, 2.0, 3.0))

    def test_zero_axis(self):
        with pytest.raises(ValueError):
            Rotation((0, 0, 0), 45)


class TestScale:

    def test_uniform_and_axes(self):
        assert Scale(2).transform_point((1.0, 2.0, 3.0)) == (2.0, 4.0, 6.0)
        assert Scale(1, 2, 3).transform_point((1.0, 1.0, 1.0)) == (1.0, 2.0, 3.0)
        assert Scale((1, 2, 4), inverse=True).transform_point((1.0, 1.0, 1.0)) == (1.0, 0.5, 0.25)

    def test_zero(self):
        with pytest.raises(ValueError):
            Scale(0)
