"""Unit tests for contour geometry.

Tests cover:
- Signed area of closed and open contours
- Winding classification and its agreement with area
- Point-to-segment and point-to-contour squared distance
- Winding normalization
- Edge cases (empty contours, degenerate segments, NaN coordinates)
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from contourkit.core import (
    area_signed,
    distance_sq,
    distance_to_point_sq,
    winding,
    with_winding,
)
from contourkit.domain import ClosedContour, OpenContour, Point, Segment, Winding


def _closed(*coords: tuple[float, float]) -> ClosedContour:
    return ClosedContour([Point(x, y) for x, y in coords])


SQUARE_CCW = [(0, 0), (100, 0), (100, 100), (0, 100)]
TRIANGLE = [(0.0, 0.0), (1.0, 1.0), (1.0, 0.0)]


class TestSignedArea:
    """Tests for area_signed."""

    def test_clockwise_triangle(self) -> None:
        """Test clockwise triangle has negative area."""
        assert area_signed(_closed((0.0, 0.0), (0.0, 1.0), (1.0, 0.0))) == -0.5

    def test_counter_clockwise_triangle(self) -> None:
        """Test counter-clockwise triangle has positive area."""
        assert area_signed(_closed((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))) == 0.5

    def test_square(self) -> None:
        """Test square area in both directions."""
        assert area_signed(_closed(*SQUARE_CCW)) == 10000
        assert area_signed(_closed(*reversed(SQUARE_CCW))) == -10000

    def test_empty_contour_is_zero(self) -> None:
        """No points gives exactly zero."""
        assert area_signed(ClosedContour([])) == 0
        assert area_signed(OpenContour([])) == 0

    def test_single_point_open_is_zero(self) -> None:
        """Test single-point open contour has zero area."""
        assert area_signed(OpenContour([Point(3.0, 4.0)])) == 0

    def test_collinear_is_zero(self) -> None:
        """Test collinear points enclose nothing."""
        assert area_signed(_closed((0, 0), (1, 1), (2, 2))) == 0

    def test_open_contour_skips_closing_edge(self) -> None:
        """An open contour only sums its explicit edges."""
        contour = OpenContour([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        # (1*1 - 1*0) + (1*1 - 0*1) = 2, halved
        assert area_signed(contour) == 1

    @pytest.mark.parametrize("shift", [1, 2, 3])
    def test_invariant_under_rotation(self, shift: int) -> None:
        """Rotating the start point of a closed contour keeps the area."""
        rotated = SQUARE_CCW[shift:] + SQUARE_CCW[:shift]
        assert area_signed(_closed(*rotated)) == area_signed(_closed(*SQUARE_CCW))

    def test_negates_under_reversal(self) -> None:
        """Reversing point order negates the area."""
        pentagon = [(0, 0), (4, 0), (5, 3), (2, 5), (-1, 3)]
        assert area_signed(_closed(*reversed(pentagon))) == -area_signed(_closed(*pentagon))

    def test_self_intersecting_contour(self) -> None:
        """Figure-eight contours are accepted; their lobes cancel."""
        assert area_signed(_closed((0, 0), (1, 1), (1, 0), (0, 1))) == 0

    def test_integer_coordinates_do_not_truncate(self) -> None:
        """Test integer coordinates give a fractional area."""
        assert area_signed(_closed((0, 0), (1, 0), (0, 1))) == 0.5

    def test_fraction_coordinates(self) -> None:
        """Test Fraction coordinates give an exact Fraction area."""
        area = area_signed(
            ClosedContour(
                [
                    Point(Fraction(0), Fraction(0)),
                    Point(Fraction(1, 3), Fraction(0)),
                    Point(Fraction(0), Fraction(1)),
                ]
            )
        )
        assert area == Fraction(1, 6)
        assert isinstance(area, Fraction)

    def test_decimal_coordinates(self) -> None:
        """Test Decimal coordinates give a Decimal area."""
        area = area_signed(
            ClosedContour(
                [
                    Point(Decimal("0"), Decimal("0")),
                    Point(Decimal("1"), Decimal("0")),
                    Point(Decimal("0"), Decimal("1")),
                ]
            )
        )
        assert area == Decimal("0.5")


class TestWinding:
    """Tests for winding classification."""

    def test_clockwise(self) -> None:
        """Test clockwise triangle classification."""
        assert winding(_closed((0.0, 0.0), (0.0, 1.0), (1.0, 0.0))) == Winding.CLOCKWISE

    def test_counter_clockwise(self) -> None:
        """Test counter-clockwise triangle classification."""
        assert winding(_closed((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))) == Winding.COUNTER_CLOCKWISE

    def test_degenerate_is_clockwise(self) -> None:
        """Zero-area contours are classified as clockwise."""
        assert winding(ClosedContour([])) == Winding.CLOCKWISE
        assert winding(_closed((1, 1))) == Winding.CLOCKWISE
        assert winding(_closed((0, 0), (1, 1), (2, 2))) == Winding.CLOCKWISE

    @pytest.mark.parametrize("nan", [float("nan"), Decimal("NaN")])
    def test_nan_area_does_not_raise(self, nan: object) -> None:
        """A NaN area is not <= 0, for float and Decimal alike."""
        contour = ClosedContour([Point(nan, 0), Point(1, 0), Point(0, 1)])
        assert winding(contour) == Winding.COUNTER_CLOCKWISE

    @pytest.mark.parametrize(
        "coords",
        [
            SQUARE_CCW,
            list(reversed(SQUARE_CCW)),
            [(0, 0), (1, 1), (2, 2)],
            [(0, 0), (4, 0), (5, 3), (2, 5), (-1, 3)],
        ],
    )
    def test_agrees_with_area_sign(self, coords: list[tuple[int, int]]) -> None:
        """Positive area and counter-clockwise winding go together."""
        contour = _closed(*coords)
        assert (area_signed(contour) > 0) == (winding(contour) == Winding.COUNTER_CLOCKWISE)


class TestSegmentDistance:
    """Tests for point-to-segment squared distance."""

    def test_perpendicular_projection(self) -> None:
        """Test projection onto the segment interior."""
        segment = Segment(Point(0.0, 0.0), Point(2.0, 0.0))
        assert distance_sq(segment, Point(1.0, 1.0)) == 1.0

    def test_clamped_to_start(self) -> None:
        """Test projection before the start clamps to the start point."""
        segment = Segment(Point(0.0, 0.0), Point(2.0, 0.0))
        assert distance_sq(segment, Point(-3.0, 4.0)) == 25.0

    def test_clamped_to_end(self) -> None:
        """Test projection past the end clamps to the end point."""
        segment = Segment(Point(0.0, 0.0), Point(2.0, 0.0))
        assert distance_sq(segment, Point(5.0, 4.0)) == 25.0

    def test_point_on_segment(self) -> None:
        """Test a point on the segment is at distance zero."""
        segment = Segment(Point(0.0, 0.0), Point(1.0, 1.0))
        assert distance_sq(segment, Point(0.5, 0.5)) == 0.0

    def test_degenerate_segment(self) -> None:
        """Zero-length segments measure to their start point."""
        segment = Segment(Point(1, 1), Point(1, 1))
        assert distance_sq(segment, Point(4, 5)) == 25

    def test_method_matches_function(self) -> None:
        """Test Segment.distance_to_point_sq delegates to distance_sq."""
        segment = Segment(Point(0.0, 0.0), Point(1.0, 1.0))
        query = Point(0.0, 1.0)
        assert segment.distance_to_point_sq(query) == distance_sq(segment, query) == 0.5

    def test_accepts_foreign_point_types(self) -> None:
        """Any object with x and y attributes can be measured."""

        class Pixel:
            def __init__(self, x: int, y: int) -> None:
                self.x = x
                self.y = y

        segment = Segment(Pixel(0, 0), Pixel(0, 2))
        assert distance_sq(segment, Pixel(3, 1)) == 9


class TestContourDistance:
    """Tests for nearest-boundary squared distance."""

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ((0.0, 0.0), 0.0),
            ((0.5, 0.0), 0.0),
            ((0.5, 0.5), 0.0),
            ((0.0, 1.0), 0.5),
            ((2.0, 2.0), 2.0),
            ((-2.0, -2.0), 8.0),
        ],
    )
    def test_triangle(self, query: tuple[float, float], expected: float) -> None:
        """Test distances to a closed triangle."""
        contour = _closed(*TRIANGLE)
        assert distance_to_point_sq(contour, Point(*query)) == expected

    def test_vertices_are_zero(self) -> None:
        """Test every vertex lies on the boundary."""
        contour = _closed(*TRIANGLE)
        for x, y in TRIANGLE:
            assert distance_to_point_sq(contour, Point(x, y)) == 0.0

    def test_open_contour_ignores_closing_edge(self) -> None:
        """The gap of an open contour is not part of its boundary."""
        points = [Point(0.0, 0.0), Point(1.0, 1.0), Point(1.0, 0.0)]
        query = Point(0.5, 0.0)
        assert distance_to_point_sq(ClosedContour(points), query) == 0.0
        assert distance_to_point_sq(OpenContour(points), query) == 0.125

    def test_absent_without_segments(self) -> None:
        """No segments gives None, not zero."""
        assert distance_to_point_sq(ClosedContour([]), Point(0, 0)) is None
        assert distance_to_point_sq(OpenContour([Point(0, 0)]), Point(0, 0)) is None

    def test_single_point_closed(self) -> None:
        """A one-point closed contour measures to that point."""
        assert distance_to_point_sq(_closed((3, 4)), Point(0, 0)) == 25

    def test_nan_does_not_abort(self) -> None:
        """NaN distances tie instead of raising."""
        contour = OpenContour([Point(float("nan"), 0.0), Point(0.0, 0.0), Point(1.0, 0.0)])
        result = distance_to_point_sq(contour, Point(0.5, 1.0))
        assert result is not None
        assert math.isnan(result)

    def test_nan_after_valid_value_keeps_minimum(self) -> None:
        """A later NaN distance does not replace an earlier minimum."""
        contour = OpenContour([Point(0.0, 0.0), Point(1.0, 0.0), Point(float("nan"), 0.0)])
        assert distance_to_point_sq(contour, Point(0.5, 1.0)) == 1.0

    def test_decimal_nan_does_not_abort(self) -> None:
        """Decimal NaN refuses ordering; it still ties instead of raising."""
        contour = OpenContour([Point(Decimal("NaN"), 0), Point(0, 0), Point(1, 0)])
        result = distance_to_point_sq(contour, Point(Decimal("0.5"), 1))
        assert isinstance(result, Decimal)
        assert result.is_nan()

    def test_decimal_nan_after_valid_value_keeps_minimum(self) -> None:
        """A later Decimal NaN distance does not replace an earlier minimum."""
        contour = OpenContour([Point(0, 0), Point(1, 0), Point(Decimal("NaN"), 0)])
        assert distance_to_point_sq(contour, Point(Decimal("0.5"), 1)) == 1


class TestWithWinding:
    """Tests for winding normalization."""

    def test_matching_winding_returns_same_contour(self) -> None:
        """Test contours already wound as requested are returned as is."""
        contour = _closed(*SQUARE_CCW)
        assert with_winding(contour, Winding.COUNTER_CLOCKWISE) is contour

    def test_reverses_points(self) -> None:
        """Test mismatched contours are reversed."""
        contour = _closed(*SQUARE_CCW)
        result = with_winding(contour, Winding.CLOCKWISE)
        assert isinstance(result, ClosedContour)
        assert result.points == tuple(reversed(contour.points))
        assert winding(result) == Winding.CLOCKWISE

    def test_keeps_open_kind(self) -> None:
        """Test reversing an open contour keeps it open."""
        contour = OpenContour([Point(0, 0), Point(1, 0), Point(0, 1)])
        result = with_winding(contour, Winding.CLOCKWISE)
        assert isinstance(result, OpenContour)

    @pytest.mark.parametrize("target", list(Winding))
    def test_zero_area_returned_unchanged(self, target: Winding) -> None:
        """Zero-area contours are never reversed."""
        contour = _closed((0, 0), (1, 1), (2, 2))
        assert with_winding(contour, target) is contour
        assert with_winding(ClosedContour([]), target) == ClosedContour([])
