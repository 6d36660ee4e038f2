# src/libdialog/widgets/checkbox.py
"""
Dialog checkboxes.
"""

from ..core.constants import DEFAULT_CHECKBOX_SIZE
from .base import PooledWidget


class CheckBox(PooledWidget):
    """
    A pooled checkbox.

    The initial state comes from the spec's get_value; clicks report the
    new state through set_value.
    """

    kind = 'checkbox'
    specs_attribute = 'checkboxes'

    def __init__(self, host, name):
        super().__init__(host, name)
        self.frame.set_size(DEFAULT_CHECKBOX_SIZE, DEFAULT_CHECKBOX_SIZE)
        self.frame.set_script('click', self._on_click)

    def configure(self, spec, data):
        self.frame.set_text(spec.label or '')
        checked = bool(spec.get_value(self, data)) if spec.get_value else False
        self.frame.set_checked(checked)

    def get_checked(self):
        return self.frame.get_checked()

    def _on_click(self, input_device='LeftButton', pressed=False):
        spec, dialog = self.current_spec()
        if spec is not None and spec.set_value:
            spec.set_value(self, self.frame.get_checked(), dialog.data, input_device, pressed)
