# src/doseviz/ui/plots.py
import numpy as np
from PySide6.QtWidgets import QWidget, QVBoxLayout
import pyqtgraph as pg
from doseengine.config import CHART_TITLE, SERIES_LABEL, PEN_COLORS, FILL_ALPHA


class PlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # Main plot area
        self.plot_widget = pg.PlotWidget(title=CHART_TITLE)
        self.plot_widget.setLabel("left", "Quantity")
        self.plot_widget.setLabel("bottom", "Time")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.addLegend(offset=(10, 10))
        layout.addWidget(self.plot_widget)

        self.curve = None

    def plot_series(self, t: np.ndarray, q: np.ndarray, dark: bool = False):
        """Replace the chart with one labelled line; colours follow the palette."""
        rgb = PEN_COLORS["dark" if dark else "light"]
        self.plot_widget.clear()
        # nan samples are left as gaps
        self.curve = self.plot_widget.plot(
            t, q,
            pen=pg.mkPen(color=rgb, width=2),
            symbol="o", symbolSize=4,
            symbolBrush=pg.mkBrush(*rgb, FILL_ALPHA),
            name=SERIES_LABEL,
            connect="finite",
        )

    def clear(self):
        self.plot_widget.clear()
        self.curve = None
