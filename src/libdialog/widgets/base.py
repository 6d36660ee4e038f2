# src/libdialog/widgets/base.py
"""
Shared plumbing for pooled dialog widgets.
"""

from collections import namedtuple

# The dialog that currently owns a widget and the 1-based position of the
# widget's spec in that dialog's delegate. Replaced on every acquisition.
WidgetBinding = namedtuple('WidgetBinding', ['dialog', 'index'])


class PooledWidget:
    """
    Base class for recyclable widgets attached to dialogs.

    Event handlers are registered once, when the widget is built, and look
    up the behaviour to run through the current binding at call time, so a
    recycled widget always follows its current owner.

    Attributes:
        host: Host toolkit
        name (str): Stable creation-order name
        frame: Host frame backing the widget
        binding (WidgetBinding): Current owner, None while pooled
    """

    kind = None
    specs_attribute = None

    def __init__(self, host, name):
        self.host = host
        self.name = name
        self.binding = None
        self.frame = host.create_frame(self.kind, name, host.screen)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"

    @property
    def dialog(self):
        return self.binding.dialog if self.binding else None

    @property
    def index(self):
        return self.binding.index if self.binding else None

    def bind(self, dialog, index):
        self.binding = WidgetBinding(dialog, index)
        self.frame.set_parent(dialog.frame)

    def unbind(self):
        self.frame.hide()
        self.frame.set_parent(None)
        self.binding = None

    def current_spec(self):
        """
        Look up this widget's spec on its owner's delegate.

        Returns:
            tuple: (spec, dialog), or (None, None) while unbound
        """
        binding = self.binding
        if binding is None or binding.dialog.delegate is None:
            return None, None
        specs = getattr(binding.dialog.delegate, self.specs_attribute)
        if not 0 < binding.index <= len(specs):
            return None, None
        return specs[binding.index - 1], binding.dialog
