# src/libdialog/host/gtk.py
"""
GTK 4 host toolkit for LibDialog.

Every frame becomes a native widget on one Gtk.Fixed canvas filling the
window. Anchors are resolved to absolute positions on idle, after all the
changes of the current event have been made. Sound cues are WAV files
played with soundfile and sounddevice.
"""

import logging
from pathlib import Path

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gdk, GLib, Gtk, Pango
import sounddevice as sd
import soundfile as sf

from ..core.constants import DEFAULT_DIALOG_BACKDROP, DEFAULT_DIALOG_HEIGHT, DEFAULT_DIALOG_WIDTH, DIALOG_TEXT_SIDE_MARGIN
from ..utils.config import merge_config
from .base import Frame, HostToolkit
from .theme import apply_theme

logger = logging.getLogger('libdialog.host')

DEFAULT_SCREEN_SIZE = (1280, 800)


def _make_label():
    label = Gtk.Label()
    label.set_wrap(True)
    label.set_wrap_mode(Pango.WrapMode.WORD_CHAR)
    label.set_justify(Gtk.Justification.CENTER)
    return label


WIDGET_FACTORIES = {
    'dialog': lambda: Gtk.Box(orientation=Gtk.Orientation.VERTICAL),
    'container': lambda: Gtk.Box(orientation=Gtk.Orientation.VERTICAL),
    'fontstring': _make_label,
    'texture': Gtk.Image,
    'close': lambda: Gtk.Button.new_from_icon_name('window-close-symbolic'),
    'button': Gtk.Button,
    'checkbox': Gtk.CheckButton,
    'editbox': Gtk.Entry,
}


class GtkFrame(Frame):
    """
    Frame backed by a GTK widget on the host canvas.

    Attributes:
        widget (Gtk.Widget): Native widget, None for the screen frame
    """

    def __init__(self, host, kind, name=None, parent=None):
        super().__init__(host, kind, name, parent)
        self._syncing = False
        factory = WIDGET_FACTORIES.get(kind)
        self.widget = factory() if factory else None
        if self.widget is not None:
            self.widget.add_css_class(f'libdialog-{kind}')
            self.widget.set_visible(False)
            host.fixed.put(self.widget, 0, 0)
            self._connect_signals()

    def _connect_signals(self):
        widget = self.widget
        if self.kind in ('button', 'close'):
            widget.connect('clicked', lambda _: self.fire('click', 'LeftButton', False))
        elif self.kind == 'checkbox':
            widget.connect('toggled', self._on_toggled)
        elif self.kind == 'editbox':
            widget.connect('activate', lambda _: self.fire('enter_pressed'))
            widget.connect('changed', self._on_changed)
            controller = Gtk.EventControllerKey()
            controller.connect('key-pressed', self._on_key_pressed)
            widget.add_controller(controller)

    def _on_toggled(self, widget):
        if self._syncing:
            return
        self._checked = widget.get_active()
        self.fire('click', 'LeftButton', False)

    def _on_changed(self, widget):
        if self._syncing:
            return
        if self.input_text(widget.get_text()):
            self._syncing = True
            try:
                widget.set_text(self._text)
                widget.set_position(-1)
            finally:
                self._syncing = False
        self.fire('text_changed', True)

    def _on_key_pressed(self, controller, keyval, keycode, state):
        if keyval == Gdk.KEY_Escape:
            self.fire('escape_pressed')
            return True
        return False

    def _changed(self):
        self.host.queue_sync()

    def set_text(self, text):
        super().set_text(text)
        widget = self.widget
        self._syncing = True
        try:
            if self.kind in ('button', 'checkbox'):
                widget.set_label(self._text)
            elif self.kind == 'fontstring':
                widget.set_text(self._text)
            elif self.kind == 'editbox':
                widget.set_text(self._text)
        finally:
            self._syncing = False

    def set_checked(self, checked):
        super().set_checked(checked)
        if self.kind == 'checkbox':
            self._syncing = True
            try:
                self.widget.set_active(self._checked)
            finally:
                self._syncing = False

    def set_texture(self, texture):
        super().set_texture(texture)
        if self.kind != 'texture':
            return
        if texture is None:
            self.widget.clear()
        elif Path(str(texture)).is_file():
            self.widget.set_from_file(str(texture))
        else:
            self.widget.set_from_icon_name(str(texture))

    def set_max_letters(self, max_letters):
        super().set_max_letters(max_letters)
        if self.kind == 'editbox':
            self.widget.set_max_length(self.max_letters)

    def _layout(self):
        widget = self.widget or self.host.fixed
        layout = widget.create_pango_layout(self._text)
        if self.kind == 'fontstring' and self._width > 0:
            layout.set_width(int(self._width * Pango.SCALE))
            layout.set_wrap(Pango.WrapMode.WORD_CHAR)
        return layout

    def get_text_width(self):
        if not self._text:
            return 0
        return self._layout().get_pixel_size()[0]

    def get_text_height(self):
        if not self._text:
            return 0
        return self._layout().get_pixel_size()[1]

    def sync(self):
        """Push visibility, size and position to the native widget."""
        widget = self.widget
        if widget is None:
            return
        visible = self.is_visible()
        widget.set_visible(visible)
        if not visible:
            return

        rect = self.get_rect()
        widget.set_size_request(
            int(rect.width) if rect.width > 0 else -1,
            int(rect.height) if rect.height > 0 else -1
        )
        self.host.fixed.move(widget, rect.left, rect.top)
        if self.kind == 'editbox' and self.auto_focus and not widget.has_focus():
            widget.grab_focus()


class GtkHost(HostToolkit):
    """
    Host toolkit drawing LibDialog frames inside a GTK window.

    Attributes:
        window (Gtk.Window): Window whose child becomes the frame canvas
        fixed (Gtk.Fixed): Canvas all frame widgets are placed on
        sounds_dir (Path): Directory holding <cue>.wav files
    """

    def __init__(self, window, config=None):
        config = merge_config(config)
        self.window = window
        self.fixed = Gtk.Fixed()
        window.set_child(self.fixed)
        self.sounds_dir = Path(config["sounds_dir"]).expanduser()
        self._frames = []
        self._sync_id = None

        width, height = window.get_default_size()
        if width <= 0 or height <= 0:
            width, height = DEFAULT_SCREEN_SIZE
        super().__init__(width, height)

        controller = Gtk.EventControllerKey()
        controller.connect('key-pressed', self._on_key_pressed)
        window.add_controller(controller)

        self.css_provider = apply_theme(window.get_display(), config["theme"], DEFAULT_DIALOG_BACKDROP)

    def create_frame(self, kind, name=None, parent=None):
        frame = GtkFrame(self, kind, name, parent)
        self._frames.append(frame)
        return frame

    def queue_sync(self):
        if self._sync_id is None:
            self._sync_id = GLib.idle_add(self._sync_frames)

    def _sync_frames(self):
        self._sync_id = None
        for frame in self._frames:
            frame.sync()
        return False

    def _on_key_pressed(self, controller, keyval, keycode, state):
        if keyval == Gdk.KEY_Escape:
            self.fire_hook('escape_pressed')
            return True
        return False

    def play_sound(self, cue):
        path = self.sounds_dir / f"{cue}.wav"
        if not path.is_file():
            logger.debug("No sound file for cue %s", cue)
            return
        try:
            data, sample_rate = sf.read(str(path))
            sd.play(data, sample_rate)
        except (RuntimeError, sd.PortAudioError) as e:
            logger.warning("Sound cue %s failed: %s", cue, e)

    def show_default_dialog(self, text):
        """
        Show one of the host's own dialogs with a line of text.

        Returns:
            GtkFrame: The dialog frame, for pop_default_dialog()
        """
        frame = self.create_frame('dialog', None, self.screen)
        frame.set_size(DEFAULT_DIALOG_WIDTH, DEFAULT_DIALOG_HEIGHT)
        label = self.create_frame('fontstring', None, frame)
        label.set_width(DEFAULT_DIALOG_WIDTH - DIALOG_TEXT_SIDE_MARGIN)
        label.set_point('CENTER', frame, 'CENTER')
        label.set_text(text)
        label.show()
        self.push_default_dialog(frame)
        return frame
