"""Tests for octant coordinate mapping and the truncated distance metric."""

from fov.world.octant import OCTANTS, distance_between, octant_to_xy


class TestOctantToXY:
    def test_identity_octant(self):
        # 8 has none of the low three bits set
        assert octant_to_xy(10, 20, 3, 1, 8) == (13, 21)

    def test_flip_distance(self):
        assert octant_to_xy(10, 20, 3, 1, 1) == (7, 21)

    def test_flip_height(self):
        assert octant_to_xy(10, 20, 3, 1, 2) == (13, 19)

    def test_swap_axes(self):
        assert octant_to_xy(10, 20, 3, 1, 4) == (11, 23)

    def test_all_flags(self):
        assert octant_to_xy(10, 20, 3, 1, 7) == (9, 17)

    def test_octants_cover_every_reflection(self):
        """The eight ids produce the eight sign/axis variants of one offset."""
        cells = {octant_to_xy(0, 0, 2, 1, o) for o in OCTANTS}
        assert cells == {
            (2, 1), (-2, 1), (2, -1), (-2, -1),
            (1, 2), (-1, 2), (1, -2), (-1, -2),
        }

    def test_zero_height_lands_on_axes(self):
        cells = {octant_to_xy(0, 0, 1, 0, o) for o in OCTANTS}
        assert cells == {(1, 0), (-1, 0), (0, 1), (0, -1)}

    def test_octant_ids(self):
        assert list(OCTANTS) == [1, 2, 3, 4, 5, 6, 7, 8]


class TestDistanceBetween:
    def test_same_point(self):
        assert distance_between(4, 4, 4, 4) == 0

    def test_straight_line(self):
        assert distance_between(3, 3, 6, 3) == 3

    def test_truncates_instead_of_rounding(self):
        # sqrt(8) = 2.83 and sqrt(10) = 3.16
        assert distance_between(0, 0, 2, 2) == 2
        assert distance_between(0, 0, 3, 1) == 3
        assert distance_between(0, 0, 1, 1) == 1

    def test_pythagorean_triple(self):
        assert distance_between(0, 0, 3, 4) == 5

    def test_symmetric_and_negative_coords(self):
        assert distance_between(-2, -3, 1, 1) == distance_between(1, 1, -2, -3) == 5
