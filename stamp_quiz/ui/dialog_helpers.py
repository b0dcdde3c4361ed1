"""Message box shortcuts used by the quiz window and its dialogs."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_restart(parent: QWidget, message: str) -> bool:
    """Ask before throwing away a session in progress; True means go ahead."""
    reply = QMessageBox.question(
        parent,
        "Restart Quiz",
        message,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show an info box whose text can be selected and copied (help, about)."""
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setTextInteractionFlags(Qt.TextSelectableByMouse)
    msg_box.setStandardButtons(QMessageBox.Ok)
    msg_box.exec()
