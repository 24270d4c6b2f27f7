# ui/info_dialog.py
from __future__ import annotations

import logging

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.attributes import SysInfo
from ..core.errors import SysInfoError

logger = logging.getLogger(__name__)

PRIMARY = "#22ABE1"

_FIELDS = (
    ("platform", "Platform"),
    ("chipid", "Chip ID"),
    ("serial", "Serial"),
    ("fingerprint", "Fingerprint"),
)


class InfoDialog(QtWidgets.QDialog):
    def __init__(self, sysinfo: SysInfo, parent=None):
        super().__init__(parent)
        self.sysinfo = sysinfo

        self.setWindowTitle("sunxi info")
        self.setMinimumWidth(640)
        self.setWindowFlags(self.windowFlags() & ~QtCore.Qt.WindowContextHelpButtonHint)

        root = QtWidgets.QVBoxLayout(self)
        root.setContentsMargins(24,24,24,24); root.setSpacing(16)

        title = QtWidgets.QLabel("Board identity")
        title.setStyleSheet("font-size:20px; font-weight:800; color:#0B1221;")
        root.addWidget(title)

        form = QtWidgets.QFormLayout()
        mono = QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.FixedFont)
        self.fields: dict[str, QtWidgets.QLineEdit] = {}
        for key, label in _FIELDS:
            edit = QtWidgets.QLineEdit()
            edit.setReadOnly(True)
            edit.setFont(mono)
            form.addRow(label, edit)
            self.fields[key] = edit
        root.addLayout(form)

        self.lbl_status = QtWidgets.QLabel("")
        self.lbl_status.setStyleSheet("color:#67728A; font-size:12px;")
        self.lbl_status.setWordWrap(True)
        root.addWidget(self.lbl_status)

        btns = QtWidgets.QHBoxLayout(); btns.addStretch(1)
        self.btn_refresh = QtWidgets.QPushButton("Refresh")
        self.btn_copy = QtWidgets.QPushButton("Copy fingerprint"); self.btn_copy.setProperty("primary", True)
        self.btn_close = QtWidgets.QPushButton("Close")
        btns.addWidget(self.btn_refresh); btns.addWidget(self.btn_copy); btns.addWidget(self.btn_close)
        root.addLayout(btns)

        self.btn_refresh.clicked.connect(self.refresh)
        self.btn_copy.clicked.connect(self._copy_fingerprint)
        self.btn_close.clicked.connect(self.accept)

        self.refresh()

    def refresh(self) -> bool:
        """
        Re-read every value. On failure the fields are cleared rather than
        left showing stale data.
        """
        try:
            values = self.sysinfo.snapshot()
        except SysInfoError as e:
            logger.error("reading board identity failed: %s", e)
            for edit in self.fields.values():
                edit.clear()
            self.btn_copy.setEnabled(False)
            self.lbl_status.setText(f"Could not read board identity:\n{e}")
            return False

        for key, edit in self.fields.items():
            edit.setText(values[key])
        self.btn_copy.setEnabled(True)
        self.lbl_status.setText("")
        return True

    def _copy_fingerprint(self):
        fp = self.fields["fingerprint"].text()
        if not fp:
            return
        QtWidgets.QApplication.clipboard().setText(fp)
        self.lbl_status.setText("Fingerprint copied to clipboard.")
