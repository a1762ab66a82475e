# src/pkform/ui/controls.py
from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QVBoxLayout, QPushButton, QDoubleSpinBox, QComboBox, QFrame, QLabel,
    QLineEdit, QPlainTextEdit,
)
from pkcalc.types import CalculationInput, PatientDosingParameters
from pkcalc.config import default_input

ROUTE_LABELS = {"oral": "Oral", "iv": "IV Bolus"}


def _spin(value: float, upper: float, decimals: int = 2, suffix: str = "") -> QDoubleSpinBox:
    # lower bound 0 everywhere: zero means "unknown" for t½, Cl, F, tau
    box = QDoubleSpinBox(); box.setDecimals(decimals); box.setRange(0.0, upper)
    box.setValue(value)
    if suffix:
        box.setSuffix(suffix)
    return box


class ControlsPanel(QFrame):
    calculateRequested = Signal(CalculationInput)

    def __init__(self, initial: CalculationInput | None = None):
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        initial = initial or default_input()
        p = initial.params
        layout = QVBoxLayout(self)

        self.drug_name = QLineEdit(initial.drug_name)
        layout.addWidget(QLabel("Drug"))
        layout.addWidget(self.drug_name)

        # --- Dosing ---
        self.dose = _spin(p.dose_mg, 1e6, suffix=" mg")
        layout.addWidget(QLabel("Dose (mg)"))
        layout.addWidget(self.dose)

        self.route = QComboBox()
        for key, label in ROUTE_LABELS.items():
            self.route.addItem(label, key)
        self.route.setCurrentIndex(self.route.findData(p.route))
        layout.addWidget(QLabel("Route"))
        layout.addWidget(self.route)

        self.F = _spin(p.F, 1.0)
        self.F.setSingleStep(0.01)
        layout.addWidget(QLabel("Bioavailability (F, fraction)"))
        layout.addWidget(self.F)

        # --- PK Parameters ---
        self.Vd = _spin(p.Vd_L, 1e5, suffix=" L")
        layout.addWidget(QLabel("Volume of distribution (Vd, L)"))
        layout.addWidget(self.Vd)

        self.Cl = _spin(p.Cl_L_per_h, 1e4, suffix=" L/h")
        layout.addWidget(QLabel("Clearance (Cl, L/hr)"))
        layout.addWidget(self.Cl)

        self.t_half = _spin(p.t_half_h, 1e5, suffix=" h")
        layout.addWidget(QLabel("Half-life (t½, hr)"))
        layout.addWidget(self.t_half)

        self.ka = _spin(p.ka_per_h, 100.0, suffix=" /h")
        self.ka.setSingleStep(0.01)
        layout.addWidget(QLabel("Absorption rate ka (1/hr)"))
        layout.addWidget(self.ka)

        self.tau = _spin(p.tau_h, 1e4, suffix=" h")
        layout.addWidget(QLabel("Dosing interval (tau, hr)"))
        layout.addWidget(self.tau)

        self.css = _spin(p.css_target_mg_per_L, 1e4, suffix=" mg/L")
        self.css.setSingleStep(0.01)
        layout.addWidget(QLabel("Desired average Css (mg/L)"))
        layout.addWidget(self.css)

        # --- Measured points ---
        self.points = QPlainTextEdit(initial.points_csv)
        self.points.setFixedHeight(70)
        layout.addWidget(QLabel("Concentration-time points (e.g. 0:0,1:2.1,2:3.5)"))
        layout.addWidget(self.points)

        go = QPushButton("Calculate"); layout.addWidget(go)
        go.clicked.connect(self._emit_request)
        layout.addStretch(1)

    def current_input(self) -> CalculationInput:
        params = PatientDosingParameters(
            dose_mg=float(self.dose.value()),
            route=self.route.currentData(),
            F=float(self.F.value()),
            Vd_L=float(self.Vd.value()),
            Cl_L_per_h=float(self.Cl.value()),
            t_half_h=float(self.t_half.value()),
            ka_per_h=float(self.ka.value()),
            tau_h=float(self.tau.value()),
            css_target_mg_per_L=float(self.css.value()),
        )
        return CalculationInput(params=params,
                                points_csv=self.points.toPlainText(),
                                drug_name=self.drug_name.text().strip() or "Drug")

    def _emit_request(self):
        self.calculateRequested.emit(self.current_input())
