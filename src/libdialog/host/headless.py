# src/libdialog/host/headless.py
"""
In-memory host toolkit.

Runs the dialog core without a display. Text is measured with a fixed
character width and line height, so layouts are deterministic; this is
the host the test suite drives.
"""

import math

from .base import Frame, HostToolkit


class HeadlessFrame(Frame):
    """Frame whose text metrics come from the host's fixed font grid."""

    def _lines(self):
        return self._text.split('\n') if self._text else []

    def get_text_width(self):
        longest = max((len(line) for line in self._lines()), default=0)
        return longest * self.host.char_width

    def get_text_height(self):
        lines = self._lines()
        if not lines:
            return 0

        # Font strings with a width wrap their text to it
        if self.kind == 'fontstring' and self._width > 0:
            per_line = max(1, int(self._width // self.host.char_width))
            count = sum(max(1, math.ceil(len(line) / per_line)) for line in lines)
        else:
            count = len(lines)
        return count * self.host.line_height


class HeadlessHost(HostToolkit):
    """
    Host toolkit that records everything and renders nothing.

    Attributes:
        char_width (int): Width of every character in pixels
        line_height (int): Height of one text line in pixels
        frames (list): Every frame created, in creation order
        sounds_played (list): Sound cues in the order they were played
    """

    def __init__(self, screen_width=1920, screen_height=1080, char_width=7, line_height=14):
        self.char_width = char_width
        self.line_height = line_height
        self.frames = []
        self.sounds_played = []
        super().__init__(screen_width, screen_height)

    def create_frame(self, kind, name=None, parent=None):
        frame = HeadlessFrame(self, kind, name, parent)
        self.frames.append(frame)
        return frame

    def play_sound(self, cue):
        self.sounds_played.append(cue)

    def press_escape(self):
        """Simulate the user pressing the escape key."""
        self.fire_hook('escape_pressed')

    def click(self, frame, input_device='LeftButton', pressed=False):
        """
        Simulate a mouse click on a frame.

        Checkboxes toggle before their click script runs, like native ones.
        """
        if frame.kind == 'checkbox':
            frame.set_checked(not frame.get_checked())
        return frame.fire('click', input_device, pressed)

    def type_text(self, frame, text):
        """Simulate the user replacing an edit box's text."""
        frame.input_text(text)
        return frame.fire('text_changed', True)
