"""Lane to color assignment."""

# Color index meaning "no color assigned"; never handed out
UNASSIGNED = 0


class ColorAssigner:
    """
    Maps lanes to palette colors, round-robin.

    Color indices are 1-based, 1..palette_size. The counter advances on
    every call to color_for(), not only when a lane is seen for the first
    time, so the color a newly mapped lane receives depends on how many
    lookups happened before it. A lane keeps its color until remove() is
    called for it.
    """

    def __init__(self, palette_size: int) -> None:
        if palette_size < 2:
            raise ValueError(f"palette needs at least 2 colors, got {palette_size}")
        self.palette_size = palette_size
        self._counter = UNASSIGNED
        self._lane_colors: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._lane_colors)

    def __contains__(self, lane: int) -> bool:
        return lane in self._lane_colors

    def color_for(self, lane: int) -> int:
        """Return the color for lane, assigning the next one if unmapped."""
        self._counter += 1
        color = self._lane_colors.get(lane)
        if color is None:
            if self._counter > self.palette_size:
                self._counter = 1
            color = self._counter
            self._lane_colors[lane] = color
        return color

    def remove(self, lane: int) -> None:
        """Forget a retired lane. Other lanes keep their colors."""
        self._lane_colors.pop(lane, None)

    def reset(self) -> None:
        self._counter = UNASSIGNED
        self._lane_colors.clear()
