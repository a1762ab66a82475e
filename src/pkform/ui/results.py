# src/pkform/ui/results.py
from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel

from pkcalc.report import DISCLAIMERS, summary_lines
from pkcalc.types import CalculationResult


class ResultsPanel(QFrame):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)

        self.title = QLabel("Results (educational)")
        layout.addWidget(self.title)
        self.body = QLabel("Press Calculate.")
        self.body.setWordWrap(True)
        layout.addWidget(self.body)

        notes = QLabel("Notes / Disclaimers:\n" + "\n".join(f"• {d}" for d in DISCLAIMERS))
        notes.setWordWrap(True)
        layout.addWidget(notes)

    def show_result(self, result: CalculationResult):
        self.title.setText(f"Results for {result.inputs.drug_name} (educational)")
        self.body.setText("\n".join(summary_lines(result)))
