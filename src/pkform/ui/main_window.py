# src/pkform/ui/main_window.py
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QStatusBar
from .controls import ControlsPanel
from .plots import PlotWidget
from .results import ResultsPanel
from pkcalc.calculate import run_calculation
from pkcalc.types import CalculationInput, CalculationResult

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("PK Calculator")
        self.resize(1100, 720)

        central = QWidget(self); self.setCentralWidget(central)
        root = QHBoxLayout(central)

        self.controls = ControlsPanel()
        self.plot = PlotWidget()
        self.results = ResultsPanel()
        right = QVBoxLayout()
        right.addWidget(self.plot, 1)
        right.addWidget(self.results, 0)
        root.addWidget(self.controls, 0)
        root.addLayout(right, 1)

        self.status = QStatusBar(); self.setStatusBar(self.status)
        self.result: CalculationResult | None = None

        self.controls.calculateRequested.connect(self.on_calculate)

    def on_calculate(self, inputs: CalculationInput):
        try:
            self.result = run_calculation(inputs)
        except Exception as e:
            logger.exception("Calculation failed")
            self.status.showMessage(f"Error: {e}", 8000)
            return
        self.setWindowTitle(f"{inputs.drug_name} - Pharmacokinetic Calculator")
        self.results.show_result(self.result)
        self.plot.plot_result(self.result)
        if not self.result.samples:
            self.status.showMessage("No usable concentration-time points", 5000)
        else:
            self.status.showMessage(f"{len(self.result.samples)} points", 5000)
