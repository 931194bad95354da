"""Edge rendering for git graph - connectors between commits."""

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainterPath, QPen
from PySide6.QtWidgets import QGraphicsItem, QGraphicsPathItem

from darkpig.graph.types import EdgeGeometry, Point


def to_qpoint(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


def build_path(geometry: EdgeGeometry) -> QPainterPath:
    """Turn layout geometry into a painter path: a line or one cubic segment."""
    path = QPainterPath()
    path.moveTo(to_qpoint(geometry.start))

    if geometry.is_straight:
        path.lineTo(to_qpoint(geometry.end))
    else:
        path.cubicTo(
            to_qpoint(geometry.control1),
            to_qpoint(geometry.control2),
            to_qpoint(geometry.end),
        )
    return path


class EdgeItem(QGraphicsPathItem):
    """
    A connector between a parent commit and its child.

    The path itself comes from the layout engine; this item only paints it.
    """

    def __init__(
        self,
        geometry: EdgeGeometry,
        color: QColor,
        parent: QGraphicsItem | None = None,
    ) -> None:
        super().__init__(parent)
        self.geometry = geometry
        self.color = color
        self.setPath(build_path(geometry))
        self._setup_style()

    def _setup_style(self) -> None:
        """Setup pen style."""
        pen = QPen(self.color, self.geometry.stroke_width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        self.setPen(pen)
        self.setBrush(Qt.BrushStyle.NoBrush)

        # Draw behind commit dots
        self.setZValue(-1)
