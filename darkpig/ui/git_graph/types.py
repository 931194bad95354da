"""Colors and constants for git graph rendering."""

from PySide6.QtGui import QColor

from darkpig.graph.colors import UNASSIGNED

# Lane palette; color index 1 is LANE_COLORS[0]
LANE_COLORS = [
    QColor("#4CAF50"),  # Green
    QColor("#2196F3"),  # Blue
    QColor("#FF9800"),  # Orange
    QColor("#9C27B0"),  # Purple
    QColor("#F44336"),  # Red
    QColor("#00BCD4"),  # Cyan
    QColor("#E91E63"),  # Pink
    QColor("#795548"),  # Brown
]

UNASSIGNED_COLOR = QColor("#9E9E9E")


def get_lane_color(color: int) -> QColor:
    """Get the QColor for a 1-based color index from the layout."""
    if color == UNASSIGNED:
        return UNASSIGNED_COLOR
    return LANE_COLORS[(color - 1) % len(LANE_COLORS)]
