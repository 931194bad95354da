"""Tests for lane color assignment."""

import pytest

from darkpig.graph.colors import UNASSIGNED, ColorAssigner


class TestColorAssigner:
    def test_palette_must_have_two_colors(self):
        with pytest.raises(ValueError):
            ColorAssigner(1)

    def test_colors_are_one_based(self):
        colors = ColorAssigner(8)
        assert colors.color_for(0) == 1
        assert colors.color_for(1) == 2

    def test_repeated_lookup_is_stable(self):
        """Same lane twice in a row gives the same color."""
        colors = ColorAssigner(4)
        first = colors.color_for(3)
        assert colors.color_for(3) == first

    def test_mapped_lane_keeps_color_across_other_lookups(self):
        colors = ColorAssigner(4)
        color = colors.color_for(0)
        colors.color_for(1)
        colors.color_for(2)
        assert colors.color_for(0) == color

    def test_counter_advances_on_every_call(self):
        colors = ColorAssigner(8)
        colors.color_for(0)
        colors.color_for(0)
        colors.color_for(0)
        # Three calls so far; the next new lane gets the fourth color
        assert colors.color_for(1) == 4

    def test_palette_of_two_cycles(self):
        """Five lanes on a two color palette: 1,2,1,2,1 and never unassigned."""
        colors = ColorAssigner(2)
        assigned = [colors.color_for(lane) for lane in range(5)]
        assert assigned == [1, 2, 1, 2, 1]
        assert UNASSIGNED not in assigned

    def test_wraps_after_palette_size(self):
        colors = ColorAssigner(3)
        assigned = [colors.color_for(lane) for lane in range(7)]
        assert assigned == [1, 2, 3, 1, 2, 3, 1]

    def test_remove_forgets_only_that_lane(self):
        colors = ColorAssigner(8)
        colors.color_for(0)
        kept = colors.color_for(1)
        colors.remove(0)

        assert 0 not in colors
        assert 1 in colors
        assert colors.color_for(1) == kept
        assert len(colors) == 1

    def test_removed_lane_gets_fresh_color(self):
        colors = ColorAssigner(8)
        assert colors.color_for(1) == 1
        colors.remove(1)
        assert colors.color_for(1) == 2

    def test_remove_unknown_lane_is_noop(self):
        colors = ColorAssigner(8)
        colors.remove(5)
        assert len(colors) == 0

    def test_reset(self):
        colors = ColorAssigner(8)
        colors.color_for(0)
        colors.color_for(1)
        colors.reset()
        assert len(colors) == 0
        assert colors.color_for(4) == 1
