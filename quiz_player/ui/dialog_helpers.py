"""Helper functions for common dialog patterns on the quiz board."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from quiz_player.constants.ui_constants import ABANDON_DIALOG_TEXT, ABANDON_DIALOG_TITLE


def confirm_abandon_game(parent: QWidget) -> bool:
    """Ask the player to confirm leaving the current game.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if the player confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        ABANDON_DIALOG_TITLE,
        ABANDON_DIALOG_TEXT,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
