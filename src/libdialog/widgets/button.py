# src/libdialog/widgets/button.py
"""
Dialog push buttons.
"""

from ..core.constants import (
    BUTTON_TEXT_PADDING,
    DEFAULT_BUTTON_HEIGHT,
    DEFAULT_BUTTON_WIDTH,
    MIN_BUTTON_WIDTH,
)
from .base import PooledWidget


class Button(PooledWidget):
    """A pooled button dispatching clicks to its ButtonSpec."""

    kind = 'button'
    specs_attribute = 'buttons'

    def __init__(self, host, name):
        super().__init__(host, name)
        self.frame.set_size(DEFAULT_BUTTON_WIDTH, DEFAULT_BUTTON_HEIGHT)
        self.frame.set_texture('dialog-button')
        self.frame.set_script('click', self._on_click)

    def configure(self, spec):
        self.frame.set_text(spec.text)
        self.frame.set_width(max(MIN_BUTTON_WIDTH, self.frame.get_text_width() + BUTTON_TEXT_PADDING))

    def _on_click(self, input_device='LeftButton', pressed=False):
        spec, dialog = self.current_spec()
        if spec is not None and spec.on_click:
            spec.on_click(self, input_device, pressed, dialog.data)
