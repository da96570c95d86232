"""
Plotting canvas.

GraphWidget keeps the current sample sets together with the axis bounds and
paints them with QPainter on every repaint.
"""
import logging

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QWidget

from plot_functions import DEFAULT_XMAX, DEFAULT_XMIN, DEFAULT_YMAX, DEFAULT_YMIN

logger = logging.getLogger(__name__)

# Inset of the plot rectangle from the widget edges, in pixels
MARGIN = 30

BACKGROUND_COLOR = QColor(Qt.GlobalColor.white)
BORDER_COLOR = QColor(Qt.GlobalColor.black)
GUIDE_COLOR = QColor(Qt.GlobalColor.gray)

# Curve colors, cycled by sample set index
LINE_COLORS = [
    QColor(Qt.GlobalColor.blue),
    QColor(Qt.GlobalColor.red),
    QColor(Qt.GlobalColor.darkGreen),
]
LINE_WIDTH = 2


class PlotMapping:
    """Affine map between data coordinates and the pixels of a plot rectangle."""

    def __init__(self, rect, xmin, xmax, ymin, ymax):
        self.rect = rect
        self.xmin = xmin
        self.xmax = xmax
        self.ymin = ymin
        self.ymax = ymax

    def to_screen(self, x, y):
        sx = (x - self.xmin) / (self.xmax - self.xmin)
        sy = (y - self.ymin) / (self.ymax - self.ymin)

        px = self.rect.left() + sx * self.rect.width()
        # pixel y grows downward
        py = self.rect.bottom() - sy * self.rect.height()
        return px, py

    def to_data(self, px, py):
        sx = (px - self.rect.left()) / self.rect.width()
        sy = (self.rect.bottom() - py) / self.rect.height()

        x = self.xmin + sx * (self.xmax - self.xmin)
        y = self.ymin + sy * (self.ymax - self.ymin)
        return x, y

    def point(self, x, y):
        px, py = self.to_screen(x, y)
        return QPointF(float(px), float(py))


class GraphWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(400, 300)

        self.sample_sets = []
        self.has_data = False
        self.xmin = DEFAULT_XMIN
        self.xmax = DEFAULT_XMAX
        self.ymin = DEFAULT_YMIN
        self.ymax = DEFAULT_YMAX

    def set_multiple(self, sample_sets, xmin, xmax, ymin, ymax):
        """Replace all curves and axis bounds"""
        self.sample_sets = list(sample_sets)
        self.xmin = xmin
        self.xmax = xmax
        self.ymin = ymin
        self.ymax = ymax
        self.has_data = len(self.sample_sets) > 0
        logger.debug(
            f"Plot state set: {len(self.sample_sets)} sample sets, "
            f"x=[{xmin}, {xmax}], y=[{ymin}, {ymax}]"
        )
        self.update()

    def clear_data(self):
        """Drop all curves"""
        self.sample_sets = []
        self.has_data = False
        logger.debug("Plot state cleared")
        self.update()

    def is_degenerate(self):
        return self.xmax == self.xmin or self.ymax == self.ymin

    def plot_rect(self):
        return QRectF(
            MARGIN, MARGIN,
            self.width() - 2 * MARGIN, self.height() - 2 * MARGIN,
        )

    def mapping(self):
        return PlotMapping(self.plot_rect(), self.xmin, self.xmax, self.ymin, self.ymax)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self.draw(painter)
        finally:
            painter.end()

    def draw(self, painter):
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), BACKGROUND_COLOR)

        if not self.has_data or self.is_degenerate():
            return

        mapping = self.mapping()

        # frame
        painter.setPen(BORDER_COLOR)
        painter.drawRect(mapping.rect)

        self.draw_zero_guides(painter, mapping)

        for index, sample_set in enumerate(self.sample_sets):
            if len(sample_set) < 2:
                continue
            color = LINE_COLORS[index % len(LINE_COLORS)]
            painter.setPen(QPen(color, LINE_WIDTH))
            painter.drawPath(self.build_path(sample_set, mapping))

    def zero_guides(self):
        """(x=0 guide, y=0 guide): drawn only when the range strictly contains zero"""
        return self.xmin < 0 < self.xmax, self.ymin < 0 < self.ymax

    def draw_zero_guides(self, painter, mapping):
        painter.setPen(QPen(GUIDE_COLOR, 1, Qt.PenStyle.DashLine))
        x_guide, y_guide = self.zero_guides()

        if x_guide:
            painter.drawLine(mapping.point(0, self.ymin), mapping.point(0, self.ymax))

        if y_guide:
            painter.drawLine(mapping.point(self.xmin, 0), mapping.point(self.xmax, 0))

    @staticmethod
    def build_path(sample_set, mapping):
        px, py = mapping.to_screen(sample_set.x, sample_set.y)

        path = QPainterPath()
        path.moveTo(float(px[0]), float(py[0]))
        for i in range(1, len(px)):
            path.lineTo(float(px[i]), float(py[i]))
        return path
