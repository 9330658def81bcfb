# src/doseviz/ui/main_window.py
from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QApplication, QMainWindow, QWidget, QHBoxLayout, QStatusBar
from .controls import ControlsPanel
from .plots import PlotWidget
from doseengine.types import RegimenParameters
from doseengine.simulate import run_regimen
from doseengine.metrics import cmax, tmax, auc_trapz


def prefers_dark_mode() -> bool:
    palette = QApplication.palette()
    return palette.color(QPalette.Window).lightness() < 128


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Half-life Calculator")
        self.resize(1100, 680)

        central = QWidget(self); self.setCentralWidget(central)
        root = QHBoxLayout(central)

        self.controls = ControlsPanel()
        self.plot = PlotWidget()
        root.addWidget(self.controls, 0)
        root.addWidget(self.plot, 1)

        self.status = QStatusBar(); self.setStatusBar(self.status)

        # wire events
        self.controls.regimenChanged.connect(self.on_regimen_changed)

        # first run using the default field values
        self.on_regimen_changed(self.controls.current_regimen())

    def on_regimen_changed(self, params: RegimenParameters):
        # Whole series is recomputed on every edit.
        try:
            t, q = run_regimen(params)
        except ValueError as e:
            self.status.showMessage(f"Error: {e}", 8000)
            return
        self.plot.plot_series(t, q, dark=prefers_dark_mode())
        msg = f"Cmax {cmax(q):.3f} at t={tmax(t, q):g} | AUC {auc_trapz(t, q):.1f}"
        self.status.showMessage(msg, 5000)
