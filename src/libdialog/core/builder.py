# src/libdialog/core/builder.py
"""
Dialog lifecycle for LibDialog.

Turns a delegate and its spawn data into a populated dialog borrowed from
the dialog pool, and tears it back down when the dialog is hidden.
"""

import logging

from ..widgets import Dialog
from .constants import MAX_BUTTONS
from .errors import DialogUsageError
from .layout import place_buttons, place_checkboxes, place_editboxes

logger = logging.getLogger('libdialog.builder')


class DialogBuilder:
    """
    Builds and releases pooled dialogs.

    Attributes:
        _context (DialogContext): Owner of the pools, queue and anchors
    """

    def __init__(self, context):
        self._context = context

    def create_dialog(self, name):
        """Construct a brand new dialog; used by the dialog pool."""
        return Dialog(
            self._context.host,
            name,
            on_show=self._on_dialog_show,
            on_hide=self._on_dialog_hide,
            on_close=self._on_close_clicked
        )

    def build(self, delegate, data=None):
        """
        Populate a dialog for delegate, or queue it if none may be shown.

        Args:
            delegate (Delegate): What to show
            data: Caller payload handed back to every callback

        Returns:
            Dialog: The built, not yet shown dialog, or None if queued

        Raises:
            DialogUsageError: If the delegate's text is empty
        """
        text = delegate.resolve_text(data)
        if not text:
            raise DialogUsageError("spawn", "dialog text required")

        context = self._context
        if context.at_capacity:
            if context.queue.enqueue(delegate, data):
                logger.debug("Dialog limit reached, queued %r", text)
            return None

        dialog = context.dialog_pool.acquire()
        dialog.reset()
        dialog.delegate = delegate
        dialog.data = data
        dialog.text.set_text(text)

        if delegate.icon:
            dialog.icon.set_texture(delegate.icon)
            dialog.icon.show()

        if delegate.no_close_button:
            dialog.close_button.hide()

        self._attach_buttons(dialog)
        self._attach_editboxes(dialog)
        self._attach_checkboxes(dialog)
        dialog.resize()
        return dialog

    def _attach_buttons(self, dialog):
        pool = self._context.button_pool
        for index, spec in enumerate(dialog.delegate.buttons[:MAX_BUTTONS], start=1):
            if not (spec.text and spec.on_click):
                continue
            button = pool.acquire()
            button.bind(dialog, index)
            button.configure(spec)
            dialog.buttons.append(button)

        place_buttons(dialog)
        for button in dialog.buttons:
            button.frame.show()

    def _attach_editboxes(self, dialog):
        pool = self._context.editbox_pool
        for index, spec in enumerate(dialog.delegate.editboxes, start=1):
            editbox = pool.acquire()
            editbox.bind(dialog, index)
            editbox.configure(spec)
            dialog.editboxes.append(editbox)

        place_editboxes(dialog)
        for editbox in dialog.editboxes:
            editbox.frame.show()

    def _attach_checkboxes(self, dialog):
        pool = self._context.checkbox_pool
        for index, spec in enumerate(dialog.delegate.checkboxes, start=1):
            checkbox = pool.acquire()
            checkbox.bind(dialog, index)
            checkbox.configure(spec, dialog.data)
            dialog.checkboxes.append(checkbox)

        place_checkboxes(dialog)
        for checkbox in dialog.checkboxes:
            checkbox.frame.show()

    def release(self, dialog):
        """
        Return a dialog and every widget attached to it to their pools.

        Args:
            dialog (Dialog): An active dialog
        """
        context = self._context
        for widgets, pool in ((dialog.editboxes, context.editbox_pool),
                              (dialog.checkboxes, context.checkbox_pool),
                              (dialog.buttons, context.button_pool)):
            for widget in widgets:
                widget.unbind()
                pool.release(widget)
            widgets.clear()

        dialog.checkbox_container.hide()
        dialog.delegate = None
        dialog.data = None
        context.dialog_pool.release(dialog)
        context.anchors.refresh_anchors()

    def _play_transition(self, cue_name):
        cue = self._context.config["sounds"].get(cue_name)
        if cue:
            self._context.host.play_sound(cue)

    def _on_dialog_show(self, dialog):
        self._play_transition("open")
        delegate = dialog.delegate
        if delegate is not None and delegate.on_show:
            delegate.on_show(dialog, dialog.data)

    def _on_dialog_hide(self, dialog):
        self._play_transition("close")
        delegate = dialog.delegate
        if delegate is None:
            return
        if delegate.on_hide:
            delegate.on_hide(dialog, dialog.data)
        self.release(dialog)
        self._context.queue.drain()

    def _on_close_clicked(self, dialog):
        delegate = dialog.delegate
        if delegate is not None and delegate.on_cancel:
            delegate.on_cancel(dialog)
        # on_cancel may have hidden the dialog and handed it to a queued spawn
        if dialog.delegate is delegate:
            dialog.hide()
