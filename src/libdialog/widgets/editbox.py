# src/libdialog/widgets/editbox.py
"""
Dialog edit boxes with an optional side label.
"""

from ..core.constants import (
    DEFAULT_EDITBOX_HEIGHT,
    DEFAULT_EDITBOX_WIDTH,
    EDITBOX_BORDER,
    EDITBOX_FONT,
    EDITBOX_LABEL_GAP,
)
from .base import PooledWidget


class EditBox(PooledWidget):
    """
    A pooled single-line text entry.

    Attributes:
        label: Font string shown to the left of the entry
    """

    kind = 'editbox'
    specs_attribute = 'editboxes'

    def __init__(self, host, name):
        super().__init__(host, name)
        self.frame.set_size(DEFAULT_EDITBOX_WIDTH, DEFAULT_EDITBOX_HEIGHT)
        self.frame.set_font(EDITBOX_FONT)

        self.label = host.create_frame('fontstring', f"{name}Label", self.frame)
        self.label.set_point('RIGHT', self.frame, 'LEFT', -(EDITBOX_BORDER + EDITBOX_LABEL_GAP), 0)

        self.frame.set_script('enter_pressed', self._on_enter_pressed)
        self.frame.set_script('escape_pressed', self._on_escape_pressed)
        self.frame.set_script('text_changed', self._on_text_changed)

    def configure(self, spec):
        self.frame.set_width(spec.width or DEFAULT_EDITBOX_WIDTH)
        self.frame.set_max_letters(spec.max_letters)
        self.frame.set_max_bytes(spec.max_bytes)
        self.frame.set_auto_focus(spec.auto_focus)
        self.frame.set_text(spec.text or '')

        if spec.label:
            self.label.set_text(spec.label)
            self.label.show()
        else:
            self.label.set_text('')
            self.label.hide()

    @property
    def has_label(self):
        return self.label.is_shown()

    def get_text(self):
        return self.frame.get_text()

    def set_text(self, text):
        self.frame.set_text(text)

    def _dispatch(self, callback_name):
        spec, dialog = self.current_spec()
        if spec is None:
            return
        callback = getattr(spec, callback_name)
        if callback:
            callback(self, dialog.data)

    def _on_enter_pressed(self):
        self._dispatch('on_enter_pressed')

    def _on_escape_pressed(self):
        self._dispatch('on_escape_pressed')

    def _on_text_changed(self, user_input=False):
        self._dispatch('on_text_changed')
