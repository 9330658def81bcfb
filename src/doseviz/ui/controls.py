# src/doseviz/ui/controls.py
from dataclasses import asdict
from PySide6.QtCore import Signal
from PySide6.QtWidgets import QVBoxLayout, QLineEdit, QFrame, QLabel
from doseengine.config import DEFAULT_REGIMEN, FIELD_LABELS
from doseengine.helpers import parse_regimen
from doseengine.types import RegimenParameters


def _format_default(value: float) -> str:
    # 7.0 -> "7", 2.5 -> "2.5"
    return f"{value:g}"


class ControlsPanel(QFrame):
    """Free-text regimen inputs. Every edit re-emits the full parameter set."""
    regimenChanged = Signal(RegimenParameters)

    def __init__(self):
        super().__init__()
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel("Regimen"))

        # Text fields, not spin boxes: invalid text must reach the engine as nan.
        defaults = asdict(DEFAULT_REGIMEN)
        self.fields: dict[str, QLineEdit] = {}
        for name, label in FIELD_LABELS.items():
            edit = QLineEdit(_format_default(defaults[name]))
            edit.setObjectName(name.replace("_", "-"))
            edit.setPlaceholderText(label)
            layout.addWidget(QLabel(label))
            layout.addWidget(edit)
            edit.textChanged.connect(self._emit_regimen)
            self.fields[name] = edit

        layout.addStretch(1)

    def current_regimen(self) -> RegimenParameters:
        return parse_regimen({name: edit.text() for name, edit in self.fields.items()})

    def _emit_regimen(self, *_):
        self.regimenChanged.emit(self.current_regimen())
