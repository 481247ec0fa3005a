import math

import pytest

from glyph.affine import (
    AffineTransform,
    affine_identity,
    affine_rotation,
    affine_skew,
    affine_translation,
)

EPS = 1e-4


def test_identity_fields_and_apply():
    tr = affine_identity()
    assert (tr.xx, tr.xy, tr.yx, tr.yy, tr.x0, tr.y0) == (1, 0, 0, 1, 0, 0)
    x, y = tr.apply(3.5, -2.0)
    assert x == pytest.approx(3.5, abs=EPS)
    assert y == pytest.approx(-2.0, abs=EPS)


def test_rotation_quarter_turn():
    x, y = affine_rotation(math.pi * 0.5).apply(1.0, 0.0)
    assert x == pytest.approx(0.0, abs=EPS)
    assert y == pytest.approx(1.0, abs=EPS)


def test_translation():
    x, y = affine_translation(5.0, -2.0).apply(3.0, 4.0)
    assert x == pytest.approx(8.0, abs=EPS)
    assert y == pytest.approx(2.0, abs=EPS)


def test_skew():
    x, y = affine_skew(0.5, -0.25).apply(4.0, 2.0)
    assert x == pytest.approx(5.0, abs=EPS)
    assert y == pytest.approx(1.0, abs=EPS)


@pytest.mark.parametrize(
    "a, b",
    [
        (affine_translation(5.0, -2.0), affine_rotation(0.7)),
        (affine_rotation(1.3), affine_skew(0.5, -0.25)),
        (affine_skew(0.1, 0.2), affine_translation(-3.0, 4.0)),
    ],
)
def test_multiply_composes_b_then_a(a, b):
    point = (2.5, -1.5)
    composed = a.multiply(b).apply(*point)
    sequential = a.apply(*b.apply(*point))
    assert composed[0] == pytest.approx(sequential[0], abs=EPS)
    assert composed[1] == pytest.approx(sequential[1], abs=EPS)


def test_multiply_by_identity_is_unchanged():
    tr = AffineTransform(xx=2.0, xy=0.5, yx=-1.0, yy=3.0, x0=4.0, y0=-6.0)
    assert tr.multiply(affine_identity()) == tr
    assert affine_identity().multiply(tr) == tr


def test_rotations_add_up():
    combined = affine_rotation(0.4).multiply(affine_rotation(0.6))
    expected = affine_rotation(1.0)
    for got, want in zip(
        (combined.xx, combined.xy, combined.yx, combined.yy),
        (expected.xx, expected.xy, expected.yx, expected.yy),
    ):
        assert got == pytest.approx(want, abs=EPS)