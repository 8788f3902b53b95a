import logging
import sys
import time
from typing import List, Optional

from PyQt5.QtWidgets import (QApplication, QMainWindow, QGraphicsView, QGraphicsScene,
                            QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                            QCheckBox, QSplitter, QGroupBox, QTextEdit, QFileDialog)
from PyQt5.QtGui import QPen, QBrush, QColor, QPainter, QFont, QLinearGradient, QPalette
from PyQt5.QtCore import Qt, QRectF

from errors import HullError
from geometry import Point, Segment, extract_vertices, find_segments
from log import configure_logger
from point_io import format_point, read_points

logger = logging.getLogger(__name__)


class HullGraphicsScene(QGraphicsScene):
    """Scene with a grid background and the hull colors for the current theme"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.grid_visible = True
        self.grid_size = 40
        self.setDarkMode(True)

    def setDarkMode(self, dark_mode: bool):
        """Update scene colors based on theme"""
        if dark_mode:
            self.setBackgroundBrush(QColor(25, 25, 35))
            self.grid_color = QColor(45, 45, 55)
            self.grid_major_color = QColor(60, 60, 70)
            self.point_brush = QBrush(QColor(148, 163, 184))
        else:
            self.setBackgroundBrush(QColor(240, 240, 245))
            self.grid_color = QColor(220, 220, 220)
            self.grid_major_color = QColor(200, 200, 200)
            self.point_brush = QBrush(QColor(70, 80, 100))

        self.segment_pen = QPen(QColor(65, 130, 255), 2)
        self.segment_pen.setCosmetic(True)
        self.vertex_pen = QPen(QColor(220, 38, 38), 2)
        self.vertex_pen.setCosmetic(True)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        super().drawBackground(painter, rect)

        if not self.grid_visible:
            return

        gradient = QLinearGradient(0, 0, 0, rect.height())
        background_color = self.backgroundBrush().color()
        gradient.setColorAt(0, background_color)
        gradient.setColorAt(1, background_color.darker(105))
        painter.fillRect(rect, gradient)

        left = int(rect.left()) - (int(rect.left()) % self.grid_size)
        top = int(rect.top()) - (int(rect.top()) % self.grid_size)

        # Minor lines, then every fifth line
        for step, color in ((self.grid_size, self.grid_color), (self.grid_size * 5, self.grid_major_color)):
            painter.setPen(QPen(color, 1))
            for x in range(left, int(rect.right()), step):
                painter.drawLine(x, int(rect.top()), x, int(rect.bottom()))
            for y in range(top, int(rect.bottom()), step):
                painter.drawLine(int(rect.left()), y, int(rect.right()), y)


class HullViewerApp(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Brute-Force Hull")
        self.resize(1100, 700)

        # Data structures
        self.points: List[Point] = []
        self.history: List[List[Point]] = []
        self.segments: List[Segment] = []
        self.hull: List[Point] = []
        self.elapsed_us: Optional[int] = None
        self.last_error: Optional[str] = None

        self.dark_mode = True

        self._init_ui()
        self._connect_signals()
        self._apply_theme()
        self._refresh_info()

    def _init_ui(self):
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        main_layout = QHBoxLayout(self.central_widget)

        self.splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(self.splitter)

        # Left side: Graphics view
        self.scene = HullGraphicsScene()
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.Antialiasing)
        self.view.setDragMode(QGraphicsView.NoDrag)
        self.view.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.splitter.addWidget(self.view)

        # Right side: Controls panel
        self.panel = QWidget()
        self.panel.setMinimumWidth(280)
        self.panel.setMaximumWidth(420)
        panel_layout = QVBoxLayout(self.panel)

        title_label = QLabel("Brute-Force Hull")
        title_label.setFont(QFont("Arial", 16, QFont.Bold))
        title_label.setAlignment(Qt.AlignCenter)
        panel_layout.addWidget(title_label)

        buttons_layout = QHBoxLayout()
        self.load_btn = QPushButton("Load...")
        self.undo_btn = QPushButton("Undo")
        self.clear_btn = QPushButton("Clear")
        buttons_layout.addWidget(self.load_btn)
        buttons_layout.addWidget(self.undo_btn)
        buttons_layout.addWidget(self.clear_btn)
        panel_layout.addLayout(buttons_layout)

        options_group = QGroupBox("Display")
        options_layout = QVBoxLayout(options_group)
        self.show_grid = QCheckBox("Show grid")
        self.show_grid.setChecked(True)
        options_layout.addWidget(self.show_grid)
        self.dark_mode_checkbox = QCheckBox("Dark mode")
        self.dark_mode_checkbox.setChecked(True)
        options_layout.addWidget(self.dark_mode_checkbox)
        hint_label = QLabel("Click in the view to add a point. Ctrl+Z undoes.")
        hint_label.setStyleSheet("color: gray;")
        hint_label.setWordWrap(True)
        options_layout.addWidget(hint_label)
        panel_layout.addWidget(options_group)

        info_group = QGroupBox("Information")
        info_layout = QVBoxLayout(info_group)
        self.info_text = QTextEdit()
        self.info_text.setReadOnly(True)
        self.info_text.setMinimumHeight(240)
        info_layout.addWidget(self.info_text)
        panel_layout.addWidget(info_group)

        self.splitter.addWidget(self.panel)
        self.splitter.setSizes([750, 350])

        self.scene.setSceneRect(0, 0, 800, 600)

    def _connect_signals(self):
        self.load_btn.clicked.connect(self._load_file)
        self.undo_btn.clicked.connect(self.undo_point)
        self.clear_btn.clicked.connect(self.clear_points)
        self.show_grid.stateChanged.connect(self._toggle_grid)
        self.dark_mode_checkbox.stateChanged.connect(self._toggle_theme)
        self.view.mousePressEvent = self._handle_view_click

    def _toggle_grid(self, state):
        self.scene.grid_visible = (state == Qt.Checked)
        self.view.viewport().update()

    def _toggle_theme(self, state):
        self.dark_mode = (state == Qt.Checked)
        self._apply_theme()

    def _apply_theme(self):
        """Apply the current theme to all UI elements"""
        app = QApplication.instance()
        palette = app.palette()

        if self.dark_mode:
            palette.setColor(QPalette.Window, QColor(53, 53, 53))
            palette.setColor(QPalette.WindowText, Qt.white)
            palette.setColor(QPalette.Base, QColor(25, 25, 25))
            palette.setColor(QPalette.Text, Qt.white)
            palette.setColor(QPalette.Button, QColor(53, 53, 53))
            palette.setColor(QPalette.ButtonText, Qt.white)
            palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
        else:
            palette.setColor(QPalette.Window, QColor(240, 240, 245))
            palette.setColor(QPalette.WindowText, QColor(0, 0, 0))
            palette.setColor(QPalette.Base, QColor(255, 255, 255))
            palette.setColor(QPalette.Text, QColor(0, 0, 0))
            palette.setColor(QPalette.Button, QColor(240, 240, 240))
            palette.setColor(QPalette.ButtonText, QColor(0, 0, 0))
            palette.setColor(QPalette.Highlight, QColor(61, 174, 233))

        app.setPalette(palette)
        self.scene.setDarkMode(self.dark_mode)
        self.view.viewport().update()
        self._redraw()

    def _handle_view_click(self, event):
        scene_pos = self.view.mapToScene(event.pos())
        self.add_point((scene_pos.x(), scene_pos.y()))
        super(QGraphicsView, self.view).mousePressEvent(event)

    def _load_file(self):
        filename, _ = QFileDialog.getOpenFileName(self, "Load points", "", "Text files (*.txt);;All files (*)")
        if filename:
            self.load_points(filename)

    # Point set edits
    def _set_points(self, pts: List[Point]):
        self.history.append(self.points)
        self.points = pts
        self.last_error = None
        self._update_hull()

    def add_point(self, pt: Point):
        # Duplicates are not allowed in the hull input
        if pt in self.points:
            return
        self._set_points(self.points + [pt])

    def undo_point(self):
        """Restore the point set from before the last click, clear or load"""
        if self.history:
            self.points = self.history.pop()
            self.last_error = None
            self._update_hull()

    def clear_points(self):
        if self.points:
            self._set_points([])

    def load_points(self, filename: str) -> bool:
        try:
            pts = read_points(filename)
        except HullError as exc:
            logger.error(str(exc))
            self.last_error = str(exc)
            self._refresh_info()
            return False

        self._set_points(pts)
        self._fit_scene()
        return True

    def _fit_scene(self):
        if not self.points:
            return
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        margin = 40
        rect = QRectF(min(xs) - margin, min(ys) - margin,
                      max(xs) - min(xs) + 2 * margin, max(ys) - min(ys) + 2 * margin)
        self.scene.setSceneRect(rect)
        self.view.fitInView(rect, Qt.KeepAspectRatio)

    def _update_hull(self):
        """Recompute the boundary segments and hull vertices"""
        start = time.perf_counter()
        if len(self.points) >= 2:
            self.segments = find_segments(self.points)
            self.hull = extract_vertices(self.segments)
        else:
            self.segments = []
            self.hull = list(self.points)
        self.elapsed_us = int((time.perf_counter() - start) * 1e6) if self.points else None

        self._redraw()
        self._refresh_info()

    def _redraw(self):
        self.scene.clear()

        for (x1, y1), (x2, y2) in self.segments:
            item = self.scene.addLine(x1, y1, x2, y2, self.scene.segment_pen)
            item.setZValue(10)

        for x, y in self.points:
            item = self.scene.addEllipse(x-4, y-4, 8, 8, QPen(Qt.NoPen), self.scene.point_brush)
            item.setZValue(20)

        for x, y in self.hull:
            item = self.scene.addEllipse(x-7, y-7, 14, 14, self.scene.vertex_pen, QBrush(Qt.NoBrush))
            item.setZValue(30)

    def _refresh_info(self):
        lines = [
            f"<b>Points:</b> {len(self.points)}",
            f"<b>Boundary segments:</b> {len(self.segments)}",
            f"<b>Hull vertices:</b> {len(self.hull)}",
            f"<b>Elapsed:</b> {self.elapsed_us} µs" if self.elapsed_us is not None else "<b>Elapsed:</b> —",
        ]
        if self.last_error:
            lines.append(f"<span style='color: red;'>{self.last_error}</span>")
        lines.extend(["", "<b>Vertices:</b>"])
        if self.hull:
            lines.extend(f"• {format_point(p)}" for p in self.hull)
        else:
            lines.append("• None")

        self.info_text.setHtml("<p>" + "<br>".join(lines) + "</p>")

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Z and event.modifiers() & Qt.ControlModifier:
            self.undo_point()
        else:
            super().keyPressEvent(event)


def main():
    configure_logger()
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = HullViewerApp()
    if len(sys.argv) > 1:
        window.load_points(sys.argv[1])
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
