"""Tests for midpoint circle rasterization."""

from __future__ import annotations

from typing import Set, Tuple

import pytest

from ringbmp.raster import WHITE, Color, PixelBuffer
from ringbmp.rendering import (
    circle_offsets,
    draw_circle,
    draw_rings,
    offset_color,
    ring_radii,
    symmetric_points,
)


def white(x: int, y: int) -> Color:
    return WHITE


def circle_points(radius: int) -> Set[Tuple[int, int]]:
    points = set()
    for x, y in circle_offsets(radius):
        points.update(symmetric_points(x, y))
    return points


def written(buffer: PixelBuffer) -> Set[Tuple[int, int]]:
    return {
        (index % buffer.width, index // buffer.width)
        for index, value in enumerate(buffer.pixels)
        if value
    }


class TestMidpoint:
    def test_small_radii(self) -> None:
        assert list(circle_offsets(1)) == [(0, 1)]
        assert list(circle_offsets(2)) == [(0, 2), (1, 2)]
        assert list(circle_offsets(3)) == [(0, 3), (1, 3), (2, 2)]

    def test_radius_one_is_a_plus(self) -> None:
        assert circle_points(1) == {(0, 1), (0, -1), (1, 0), (-1, 0)}

    def test_octant_walk(self) -> None:
        for radius in range(1, 80):
            offsets = list(circle_offsets(radius))
            assert offsets[0] == (0, radius)
            for (x0, y0), (x1, y1) in zip(offsets, offsets[1:]):
                assert x1 == x0 + 1
                assert y1 in (y0, y0 - 1)
            assert all(y >= x for x, y in offsets)

    @pytest.mark.parametrize("radius", [1, 2, 5, 17, 64, 200])
    def test_eight_way_symmetry(self, radius: int) -> None:
        points = circle_points(radius)
        for x, y in points:
            assert set(symmetric_points(x, y)) <= points

    @pytest.mark.parametrize("radius", range(1, 50))
    def test_points_near_true_circle(self, radius: int) -> None:
        for x, y in circle_points(radius):
            assert (radius - 1) ** 2 <= x * x + y * y <= (radius + 1) ** 2

    def test_symmetric_points_keep_duplicates(self) -> None:
        assert len(symmetric_points(0, 3)) == 8
        assert len(set(symmetric_points(0, 3))) == 4
        assert len(set(symmetric_points(2, 2))) == 4


class TestColorRule:
    def test_offset_color(self) -> None:
        assert offset_color(0, 10) == Color(0, 10, 255)
        assert offset_color(3, 300) == Color(3, 44, 252)
        assert offset_color(256, 1) == Color(0, 1, 255)

    def test_same_radius_paints_identically(self) -> None:
        first = PixelBuffer.create(40, 40)
        second = PixelBuffer.create(40, 40)
        draw_circle(first, 20, 20, 12)
        draw_circle(second, 20, 20, 12)
        draw_circle(second, 20, 20, 12)
        assert first.pixels == second.pixels

    def test_color_rule_gets_octant_offsets(self) -> None:
        seen = []

        def record(x: int, y: int) -> Color:
            seen.append((x, y))
            return WHITE

        draw_circle(PixelBuffer.create(20, 20), 10, 10, 6, record)
        assert seen == list(circle_offsets(6))


class TestDrawCircle:
    def test_centered_circle(self) -> None:
        buffer = PixelBuffer.create(21, 21)
        draw_circle(buffer, 10, 10, 7, white)
        expected = {(10 + x, 10 + y) for x, y in circle_points(7)}
        assert written(buffer) == expected

    def test_writes_counted(self) -> None:
        buffer = PixelBuffer.create(21, 21)
        count = draw_circle(buffer, 10, 10, 4, white)
        assert count == 8 * len(list(circle_offsets(4)))

    def test_clipping_at_corner(self) -> None:
        buffer = PixelBuffer.create(10, 10)
        count = draw_circle(buffer, 0, 0, 6, white)
        expected = {(x, y) for x, y in circle_points(6) if x >= 0 and y >= 0}
        assert written(buffer) == expected
        assert 0 < count < 8 * len(list(circle_offsets(6)))

    def test_circle_entirely_off_canvas(self) -> None:
        buffer = PixelBuffer.create(5, 5)
        assert draw_circle(buffer, 100, 100, 3, white) == 0
        assert written(buffer) == set()

    def test_radius_larger_than_canvas(self) -> None:
        buffer = PixelBuffer.create(8, 6)
        draw_circle(buffer, 4, 3, 20, white)
        assert written(buffer) == set()

    def test_writes_go_through_set_pixel(self) -> None:
        class RecordingBuffer(PixelBuffer):
            def __init__(self, *args) -> None:
                super().__init__(*args)
                self.calls = []

            def set_pixel(self, x, y, red, green, blue) -> None:
                self.calls.append((x, y))
                super().set_pixel(x, y, red, green, blue)

        buffer = RecordingBuffer.create(10, 10)
        count = draw_circle(buffer, 0, 0, 6, white)
        assert len(buffer.calls) == count
        assert all(buffer.contains(x, y) for x, y in buffer.calls)
        assert set(buffer.calls) == written(buffer)


class TestDrawRings:
    def test_rings_in_order(self) -> None:
        buffer = PixelBuffer.create(31, 31)
        draw_rings(buffer, 15, 15, [3, 6, 9], white)
        expected = set()
        for radius in (3, 6, 9):
            expected |= {(15 + x, 15 + y) for x, y in circle_points(radius)}
        assert written(buffer) == expected

    @pytest.mark.parametrize("radius", [0, -2, 1.5, True])
    def test_rejects_bad_radius(self, radius) -> None:
        buffer = PixelBuffer.create(10, 10)
        with pytest.raises(ValueError, match="positive integer"):
            draw_rings(buffer, 5, 5, [2, radius], white)
        assert written(buffer) == set()

    def test_ring_radii(self) -> None:
        assert list(ring_radii(10, 4)) == [1, 2, 3, 4, 5]
        assert list(ring_radii(1, 1)) == []
        assert ring_radii(1024, 1024)[-1] == 512
