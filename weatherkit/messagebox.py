"""A simple confirm/cancel message dialog model."""

from __future__ import annotations

import enum

from .tables import PUSH_BUTTON_STYLE, TOOL_BUTTON_STYLE

BACKGROUND_COLOR = (73, 166, 253)


class DialogResult(enum.Enum):
    """Outcome of a dialog."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class MessageBox:
    """Dialog showing text with close (0), confirm (1) and cancel (2) buttons."""

    close_button_style = TOOL_BUTTON_STYLE
    button_style = PUSH_BUTTON_STYLE

    def __init__(self) -> None:
        self.text = ""
        self.result = DialogResult.PENDING

    def set_text(self, text: str) -> None:
        """Set the message shown in the dialog."""
        self.text = text

    def button_clicked(self, index: int) -> DialogResult:
        """Apply a button press; other indexes leave the result unchanged."""
        if index in (0, 2):
            self.result = DialogResult.REJECTED
        elif index == 1:
            self.result = DialogResult.ACCEPTED
        return self.result