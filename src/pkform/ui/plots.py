# src/pkform/ui/plots.py
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout
import numpy as np
import pyqtgraph as pg

from pkcalc.helpers import to_arrays
from pkcalc.types import CalculationResult


class PlotWidget(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setLabel("left", "Concentration", units="mg/L")
        self.plot_widget.setLabel("bottom", "Time", units="h")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.addLegend()
        layout.addWidget(self.plot_widget)

    def plot_result(self, result: CalculationResult):
        self.plot_widget.clear()
        t, C = to_arrays(result.samples)
        if t.size == 0:
            return
        self.plot_widget.plot(t, C, pen=pg.mkPen(width=2), symbol="o", name="Measured")

        # Terminal-phase line through the last point, slope -k
        k = result.rates.from_terminal_slope
        if k and result.last_concentration > 0:
            t_fit = t[C > 0][-result.rates.n_terminal:]
            C_fit = result.last_concentration * np.exp(-k * (t_fit - t[-1]))
            self.plot_widget.plot(t_fit, C_fit, pen=pg.mkPen(width=1, style=Qt.PenStyle.DashLine),
                                  name="Terminal slope")

    def clear(self):
        self.plot_widget.clear()
