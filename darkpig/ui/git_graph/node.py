"""Commit dot - a selectable node with its summary line."""

from PySide6.QtCore import QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QFontMetrics, QPainter, QPen
from PySide6.QtWidgets import (
    QGraphicsItem,
    QGraphicsObject,
    QGraphicsSceneMouseEvent,
    QStyle,
    QStyleOptionGraphicsItem,
    QWidget,
)

from darkpig.graph.types import Commit


class CommitDot(QGraphicsObject):
    """
    A commit drawn as a colored circle.

    The summary label is drawn label_offset pixels to the right of the
    circle center, so labels of all commits line up in one column.
    """

    clicked = Signal(str)  # oid

    LABEL_HEIGHT = 16
    LABEL_MAX_CHARS = 60

    def __init__(
        self,
        commit: Commit,
        color: QColor,
        size: float,
        label_offset: float,
        parent: QGraphicsItem | None = None,
    ) -> None:
        super().__init__(parent)
        self.commit = commit
        self.color = color
        self.size = size
        self.label_offset = label_offset
        self._hovered = False

        self._font = QFont("sans-serif", 9)
        self._label = self._elide(commit.summary)
        self._label_width = QFontMetrics(self._font).horizontalAdvance(self._label) + 4

        self.setAcceptHoverEvents(True)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable)
        self.setToolTip(f"{commit.short_id}  {commit.author}\n\n{commit.message.strip()}")

    def _elide(self, text: str) -> str:
        if len(text) <= self.LABEL_MAX_CHARS:
            return text
        return text[: self.LABEL_MAX_CHARS - 1] + "…"

    def boundingRect(self) -> QRectF:  # noqa: N802
        """Circle plus label, centered vertically on the commit."""
        half = max(self.size, self.LABEL_HEIGHT) / 2
        return QRectF(-self.size / 2 - 2, -half, self.label_offset + self._label_width + self.size, 2 * half)

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: QWidget | None = None,
    ) -> None:
        """Paint the dot and its label."""
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        state = option.state  # type: ignore[attr-defined]
        is_selected = bool(state and (state & QStyle.StateFlag.State_Selected))

        radius = self.size / 2
        fill = self.color.lighter(130) if self._hovered else self.color
        painter.setBrush(fill)
        painter.setPen(QPen(QColor("#212121") if is_selected else self.color.darker(130), 2 if is_selected else 1))
        painter.drawEllipse(QRectF(-radius, -radius, self.size, self.size))

        # Merge commits get a hollow center
        if self.commit.is_merge:
            painter.setBrush(QColor("#FFFFFF"))
            painter.setPen(Qt.PenStyle.NoPen)
            inner = radius / 2
            painter.drawEllipse(QRectF(-inner, -inner, 2 * inner, 2 * inner))

        label_rect = QRectF(self.label_offset, -self.LABEL_HEIGHT / 2, self._label_width, self.LABEL_HEIGHT)
        if is_selected:
            painter.setBrush(QColor("#E3F2FD"))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.drawRoundedRect(label_rect, 3, 3)

        painter.setPen(QColor("#333333"))
        painter.setFont(self._font)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, self._label)

    def hoverEnterEvent(self, event: object) -> None:  # noqa: N802
        self._hovered = True
        self.update()

    def hoverLeaveEvent(self, event: object) -> None:  # noqa: N802
        self._hovered = False
        self.update()

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent) -> None:  # noqa: N802
        """Select the commit and announce it."""
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.commit.id)
        super().mousePressEvent(event)
