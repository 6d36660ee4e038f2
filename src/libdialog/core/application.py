# src/libdialog/core/application.py
"""
Demo application for LibDialog.

Opens a window drawn by GtkHost and spawns a handful of dialogs, more than
fit on screen at once, so the queue and the widget pools can be watched at
work. Escape dismisses the dialogs that allow it.
"""

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Adw, GLib, Gtk
import logging
import signal
import sys

from ..host.gtk import GtkHost
from ..utils.config import load_config
from .context import DialogContext
from .delegate import ButtonSpec, CheckBoxSpec, Delegate, EditBoxSpec

logger = logging.getLogger('libdialog.demo')


def build_demo_delegates(context):
    """Register the demo delegates on a context."""
    settings = {"sound": True, "music": False}

    def delete(button, input_device, pressed, data):
        logger.info("Deleted %s", data)
        button.dialog.hide()

    def close(widget, *_):
        widget.dialog.hide()

    def store(key):
        def set_value(checkbox, value, data, input_device, pressed):
            settings[key] = value
        return set_value

    context.register("confirm", Delegate(
        text=lambda data: f"Delete {data}?",
        buttons=[
            ButtonSpec("Delete", delete),
            ButtonSpec("Cancel", close),
        ],
        hide_on_escape=True,
    ))
    context.register("rename", Delegate(
        text="Enter a new name",
        editboxes=[EditBoxSpec(
            label="Name:",
            auto_focus=True,
            max_letters=24,
            on_enter_pressed=close,
            on_escape_pressed=close,
        )],
        buttons=[ButtonSpec("Okay", close)],
    ))
    context.register("options", Delegate(
        text="Audio options",
        icon="audio-volume-high-symbolic",
        checkboxes=[
            CheckBoxSpec(
                label=f"Enable {key}",
                get_value=lambda checkbox, data, key=key: settings[key],
                set_value=store(key),
            )
            for key in settings
        ],
        buttons=[
            ButtonSpec("Accept", close),
            ButtonSpec("Defaults", lambda button, *_: logger.info("Settings: %s", settings)),
            ButtonSpec("Close", close),
        ],
        hide_on_escape=True,
    ))


class LibDialogDemo(Adw.Application):
    """
    LibDialog demo application.

    Attributes:
        window: Main window hosting the dialogs
        host: GtkHost drawing into the window
        context: DialogContext driving the dialogs
    """

    def __init__(self, config):
        """Initialize the demo application."""
        super().__init__(application_id='org.libdialog.demo')
        self.config = config

    def do_activate(self):
        """Handle application activation."""
        self.window = Gtk.ApplicationWindow(application=self, title="LibDialog")
        self.window.set_default_size(1280, 800)

        self.host = GtkHost(self.window, self.config)
        self.context = DialogContext(self.host, self.config)
        build_demo_delegates(self.context)

        notice = self.host.show_default_dialog("A default host dialog")
        GLib.timeout_add_seconds(5, self._hide_notice, notice)

        for target in ("old_save.dat", "backup.dat"):
            self.context.spawn("confirm", target)
        self.context.spawn("rename")
        self.context.spawn("options")
        self.context.spawn("confirm", "queued.dat")

        self.window.present()

    def _hide_notice(self, notice):
        self.host.pop_default_dialog(notice)
        return False


def main():
    """Main entry point for the LibDialog demo."""
    config = load_config()
    logging.basicConfig(
        level=logging.DEBUG if config.get("debug") else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    app = LibDialogDemo(config)

    def cleanup(signum=None, frame=None):
        """Clean up resources on exit."""
        logger.info("Shutting down")
        sys.exit(0)

    signal.signal(signal.SIGINT, cleanup)
    signal.signal(signal.SIGTERM, cleanup)

    sys.exit(app.run(sys.argv))
