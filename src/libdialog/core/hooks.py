# src/libdialog/core/hooks.py
"""
Host event integration for LibDialog.

Keeps the dialog stack glued beneath the host's default dialogs and lets
the escape key dismiss dialogs that ask for it.
"""

import logging

logger = logging.getLogger('libdialog.hooks')


class EventHooks:
    """Reacts to host lifecycle events on behalf of a DialogContext."""

    def __init__(self, context):
        self._context = context

    def install(self):
        host = self._context.host
        host.hook('default_dialog_hidden', self.on_default_dialog_hidden)
        host.hook('default_dialog_repositioned', self.on_default_dialog_repositioned)
        host.hook('escape_pressed', self.on_escape_pressed)

    def on_default_dialog_hidden(self):
        self._context.anchors.refresh_anchors()
        self._context.queue.drain()

    def on_default_dialog_repositioned(self):
        self._context.anchors.refresh_anchors()

    def on_escape_pressed(self):
        """Cancel and hide every active dialog that hides on escape."""
        targets = [
            (dialog, dialog.delegate)
            for dialog in self._context.active_dialogs
            if dialog.delegate.hide_on_escape
        ]
        for dialog, delegate in targets:
            # An earlier callback may have recycled this dialog already
            if dialog.delegate is not delegate:
                continue
            if delegate.on_cancel and not delegate.cancel_ignores_escape:
                delegate.on_cancel(dialog)
                if dialog.delegate is not delegate:
                    continue
            logger.debug("Escape hides %r", dialog)
            dialog.hide()
        self._context.queue.drain()
