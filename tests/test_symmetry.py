"""Tests for sector stepping, reflection and rotation of primitives."""

import pytest

from digital_doilies.core import (
    InvalidSymmetryOrderError, Point, Segment, SymmetryConfig,
    is_close, symmetric_images
)


class TestSymmetryConfig:

    def test_defaults(self):
        config = SymmetryConfig()
        assert config.sectors == 12
        assert config.center == (400.0, 400.0)
        assert config.step == 30.0

    @pytest.mark.parametrize("sectors", [0, 1, 41, 100, -3])
    def test_out_of_range_sectors_rejected(self, sectors):
        with pytest.raises(InvalidSymmetryOrderError):
            SymmetryConfig(sectors=sectors)

    def test_non_integer_sectors_rejected(self):
        with pytest.raises(InvalidSymmetryOrderError):
            SymmetryConfig(sectors=6.5)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            SymmetryConfig(sectors=1)

    def test_odd_sector_count_uses_float_step(self):
        config = SymmetryConfig(sectors=7)
        angles = list(config.angles())
        assert angles[1] == pytest.approx(360.0 / 7)
        assert angles[1] != int(angles[1])

    def test_angles_include_both_zero_and_360(self):
        angles = list(SymmetryConfig(sectors=4).angles())
        assert angles == [0.0, 90.0, 180.0, 270.0, 360.0]

    @pytest.mark.parametrize("sectors", range(2, 41))
    def test_angle_count_includes_seam(self, sectors):
        config = SymmetryConfig(sectors=sectors)
        angles = list(config.angles())
        # One copy per sector plus the repeated copy at 360 degrees
        assert len(angles) == round(360.0 / config.step) + 1 == sectors + 1
        assert angles[0] == 0.0
        assert angles[-1] == pytest.approx(360.0)


class TestSymmetricImages:

    @pytest.mark.parametrize("sectors", range(2, 41))
    def test_copies_are_rigid_rotations(self, sectors):
        config = SymmetryConfig(sectors=sectors)
        segment = Segment(450.0, 380.0, 520.0, 150.0)

        images = symmetric_images(segment, False, config)

        assert len(images) == sectors + 1
        for k, image in enumerate(images):
            expected = segment.rotated(k * config.step, 400.0, 400.0)
            assert is_close(image, expected, tolerance=1e-6)
            assert image.length == pytest.approx(segment.length)

    @pytest.mark.parametrize("sectors", [3, 7, 12, 40])
    def test_reflection_doubles_copies(self, sectors):
        config = SymmetryConfig(sectors=sectors)
        point = Point(420.0, 300.0, 2.1)

        images = symmetric_images(point, True, config)

        assert len(images) == 2 * (sectors + 1)
        # Mirror of each rotation follows the rotated original
        assert is_close(images[1], point.reflected(400.0))

    def test_four_sector_vertical_segment(self, four_sectors):
        segment = Segment(500.0, 400.0, 500.0, 100.0)

        images = symmetric_images(segment, False, four_sectors)

        expected = [
            Segment(500.0, 400.0, 500.0, 100.0),   # 0
            Segment(400.0, 500.0, 700.0, 500.0),   # 90
            Segment(300.0, 400.0, 300.0, 700.0),   # 180
            Segment(400.0, 300.0, 100.0, 300.0),   # 270
            Segment(500.0, 400.0, 500.0, 100.0),   # 360 seam
        ]
        assert len(images) == len(expected)
        for image, want in zip(images, expected):
            assert is_close(image, want, tolerance=1e-9)
            assert image.length == pytest.approx(300.0)

        distinct = {tuple(round(v, 6) for v in (s.x1, s.y1, s.x2, s.y2)) for s in images}
        assert len(distinct) == 4


class TestReflection:

    @pytest.mark.parametrize("primitive", [
        Point(123.5, 77.25, 2.1),
        Segment(10.0, 20.0, 730.5, 611.0),
        Segment(400.0, 0.0, 400.0, 800.0),
    ])
    def test_reflection_is_an_involution(self, primitive):
        assert is_close(primitive.reflected(400.0).reflected(400.0), primitive)

    def test_reflection_about_centre_axis(self):
        segment = Segment(450.0, 100.0, 300.0, 200.0)
        mirrored = segment.reflected(400.0)
        assert mirrored == Segment(350.0, 100.0, 500.0, 200.0)

    def test_point_keeps_diameter(self):
        point = Point(10.0, 10.0, 5.0)
        assert point.reflected(400.0).diameter == 5.0
        assert point.rotated(33.0, 400.0, 400.0).diameter == 5.0

    def test_point_bounds_are_centred_on_press(self):
        point = Point(100.0, 50.0, 2.1)
        x, y, w, h = point.bounds()
        assert (w, h) == (2.1, 2.1)
        assert x + w / 2 == pytest.approx(100.0)
        assert y + h / 2 == pytest.approx(50.0)

        mirrored = point.reflected(400.0)
        mx, _, mw, _ = mirrored.bounds()
        assert mx + mw / 2 == pytest.approx(700.0)

    def test_is_close_rejects_other_kind(self):
        assert not is_close(Point(1.0, 2.0, 3.0), Segment(1.0, 2.0, 3.0, 4.0))
