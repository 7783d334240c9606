import math

import pytest

from sweepcad.config import DEFAULTS
from sweepcad.curves import (
    bezier_cubic,
    bezier_cubic_chain,
    bezier_fillet,
    bezier_quadratic,
    bezier_quadratic_chain,
    linear_cut,
    round_corner,
    round_corners,
    smooth_path,
    straight_chamfer,
    synthesize_control_points,
)
from sweepcad.errors import CurveDefinitionError, DegenerateInputError
from sweepcad.geom import dist


def _close(a, b, tol=1e-9):
    assert dist(a, b) <= tol


class TestLinearCut:

    def test_two_point_path(self):
        assert linear_cut([[0, 0], [10, 0]], 2) == [[0, 0], [5, 0], [10, 0]]

    def test_scalar_path(self):
        assert linear_cut([0, 1, 5], 2) == [0, 0.5, 1, 3, 5]

    def test_length_and_shared_endpoints(self):
        path = [[0, 0, 0], [1, 1, 0], [2, 0, 3]]
        cut = linear_cut(path, 4)
        assert len(cut) == 4 * 2 + 1
        assert cut[0] == path[0]
        assert cut[4] == path[1]
        assert cut[-1] == path[2]

    def test_default_segments(self):
        assert len(linear_cut([[0, 0], [1, 1], [2, 0]])) == 2 * DEFAULTS.segments + 1

    def test_single_point_and_empty(self):
        assert linear_cut([[1, 2]], 5) == [[1, 2]]
        with pytest.raises(DegenerateInputError):
            linear_cut([], 3)

    def test_bad_segments(self):
        with pytest.raises(ValueError):
            linear_cut([[0, 0], [1, 0]], 0)


class TestBezier:

    @pytest.mark.parametrize('p0,p1,p2', [
        ([0, 0], [1, 2], [2, 0]),
        ([1.5, -2, 3], [0, 0, 0], [7, 8, -9]),
        (0.25, 4, -3),
    ])
    def test_quadratic_endpoints(self, p0, p1, p2):
        assert bezier_quadratic(p0, p1, p2, 0) == p0
        assert bezier_quadratic(p0, p1, p2, 1) == p2

    def test_quadratic_midpoint(self):
        assert bezier_quadratic([0, 0], [1, 2], [2, 0], 0.5) == [1.0, 1.0]

    def test_cubic(self):
        p = [[0, 0], [0, 1], [1, 1], [1, 0]]
        assert bezier_cubic(*p, 0) == p[0]
        assert bezier_cubic(*p, 1) == p[3]
        assert bezier_cubic(*p, 0.5) == [0.5, 0.75]

    def test_quadratic_chain(self):
        path = [[0, 0], [1, 1], [2, 0], [3, -1], [4, 0]]
        samples = bezier_quadratic_chain(path, 4)
        assert len(samples) == 9
        assert samples[0] == [0, 0]
        assert samples[4] == [2, 0]
        assert samples[-1] == [4, 0]

    def test_cubic_chain(self):
        path = [[0, 0], [0, 1], [1, 1], [1, 0], [1, -1], [2, -1], [2, 0]]
        samples = bezier_cubic_chain(path, 5)
        assert len(samples) == 11
        assert samples[5] == [1, 0]

    def test_chain_layout_errors(self):
        with pytest.raises(CurveDefinitionError):
            bezier_quadratic_chain([[0, 0], [1, 1], [2, 0], [3, 0]], 4)
        with pytest.raises(CurveDefinitionError):
            bezier_cubic_chain([[0, 0], [1, 1], [2, 0]], 4)
        with pytest.raises(ValueError):
            bezier_cubic_chain([[0, 0], [1, 1]], 4)


class TestControlPoints:

    def test_synthesized_controls(self):
        ctrl = synthesize_control_points([[0, 0], [1, 1], [2, 0]], weight=0.5)
        assert ctrl == [[0, 0], [0, 0], [0.5, 1], [1, 1], [1.5, 1], [2, 0], [2, 0]]

    def test_controls_are_symmetric_about_interior_points(self):
        path = [[0, 0, 0], [3, 1, 0], [4, 5, 2], [8, 5, 1]]
        ctrl = synthesize_control_points(path, weight=0.4)
        assert len(ctrl) == 3 * (len(path) - 1) + 1
        for k in (1, 2):
            before, point, after = ctrl[3 * k - 1], ctrl[3 * k], ctrl[3 * k + 1]
            assert point == path[k]
            mid = [(a + b) / 2 for a, b in zip(before, after)]
            _close(mid, point)

    def test_zero_weight_adds_no_bulge(self):
        path = [[0, 0], [2, 1], [3, 5]]
        ctrl = synthesize_control_points(path, weight=0)
        assert {tuple(p) for p in ctrl} == {tuple(p) for p in path}

    def test_smooth_path_passes_through_points(self):
        path = [[0, 0], [2, 1], [3, 5], [6, 5]]
        samples = smooth_path(path, segments=6)
        assert len(samples) == 6 * 3 + 1
        for k, p in enumerate(path):
            _close(samples[6 * k], p)

    def test_needs_two_points(self):
        with pytest.raises(DegenerateInputError):
            synthesize_control_points([[0, 0]])


class TestCorners:

    prev = [0, 0]
    corner = [10, 0]
    nxt = [10, 10]

    def test_zero_radius_leaves_corner(self):
        assert round_corner(self.prev, self.corner, self.nxt, 0) == [self.corner]
        assert round_corner(self.prev, self.corner, self.nxt, [0, 0], mode='chamfer') == [self.corner]

    def test_chamfer(self):
        assert round_corner(self.prev, self.corner, self.nxt, 2, mode='chamfer') == [[8, 0], [10, 2]]
        assert round_corner(self.prev, self.corner, self.nxt, [2, 4], mode='chamfer') == [[8, 0], [10, 4]]
        assert straight_chamfer([8, 0], self.corner, [10, 2]) == [[8, 0], [10, 2]]

    def test_bezier_fillet(self):
        pts = round_corner(self.prev, self.corner, self.nxt, 2, segments=4)
        assert len(pts) == 5
        assert pts[0] == [8, 0]
        assert pts[-1] == [10, 2]
        # the fillet bows towards the corner but never reaches it
        mid = pts[2]
        assert 0 < dist(mid, self.corner) < dist([8, 0], self.corner)
        assert bezier_fillet([8, 0], self.corner, [10, 2], 4) == pts

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            round_corner(self.prev, self.corner, self.nxt, 2, mode='round')

    def test_round_corners_per_point(self):
        path = [self.prev, self.corner, self.nxt]
        assert round_corners(path, [0, 2, 0], mode='chamfer') == [[0, 0], [8, 0], [10, 2], [10, 10]]
        assert round_corners(path, 0) == path

    def test_round_corners_ignores_endpoint_radii(self):
        path = [[0, 0], [10, 0], [10, 10], [0, 10]]
        rounded = round_corners(path, [5, 1, 1, 5], mode='chamfer')
        assert rounded[0] == [0, 0]
        assert rounded[-1] == [0, 10]
        assert len(rounded) == 6

    def test_round_corners_radius_count(self):
        with pytest.raises(ValueError):
            round_corners([[0, 0], [1, 0], [1, 1]], [1, 1])
