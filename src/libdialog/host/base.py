# src/libdialog/host/base.py
"""
Host toolkit interface for LibDialog.

The dialog core never talks to a UI library directly. Everything it needs
(frames, anchoring, text measurement, sound cues, ambient state and the
host's own default dialog stack) goes through the classes in this module.
Concrete toolkits subclass HostToolkit and Frame.
"""

from abc import ABC, abstractmethod
from collections import namedtuple
import logging

logger = logging.getLogger('libdialog.host')

Anchor = namedtuple('Anchor', ['point', 'relative_to', 'relative_point', 'x', 'y'])
Rect = namedtuple('Rect', ['left', 'top', 'width', 'height'])

# Fractional position of each anchor point inside a frame. Screen
# coordinates grow to the right and downward.
ANCHOR_POINTS = {
    'TOPLEFT': (0.0, 0.0),
    'TOP': (0.5, 0.0),
    'TOPRIGHT': (1.0, 0.0),
    'LEFT': (0.0, 0.5),
    'CENTER': (0.5, 0.5),
    'RIGHT': (1.0, 0.5),
    'BOTTOMLEFT': (0.0, 1.0),
    'BOTTOM': (0.5, 1.0),
    'BOTTOMRIGHT': (1.0, 1.0),
}

HOOK_EVENTS = (
    'default_dialog_hidden',
    'default_dialog_repositioned',
    'escape_pressed',
)

DEFAULT_STACK_TOP_OFFSET = 135
MAX_ANCHOR_DEPTH = 64


class Frame(ABC):
    """
    A visual element owned by a host toolkit.

    The base class keeps all frame state in Python; toolkits that drive
    native widgets override _changed() to push the state out and implement
    text measurement.

    Attributes:
        host (HostToolkit): Toolkit that created the frame
        kind (str): Frame kind ('dialog', 'button', 'fontstring', ...)
        name (str): Stable name given at creation, may be None
        backdrop (dict): Backdrop description, if any
        texture: Texture reference, if any
        font (str): Font object name, if any
        max_letters (int): Edit box character limit, 0 for none
        max_bytes (int): Edit box UTF-8 byte limit, 0 for none
        auto_focus (bool): Whether an edit box grabs focus when shown
    """

    def __init__(self, host, kind, name=None, parent=None):
        self.host = host
        self.kind = kind
        self.name = name
        self._parent = parent
        self._points = []
        self._scripts = {}
        self._width = 0
        self._height = 0
        self._shown = False
        self._text = ''
        self._checked = False
        self.backdrop = None
        self.texture = None
        self.font = None
        self.max_letters = 0
        self.max_bytes = 0
        self.auto_focus = False

    def __repr__(self):
        return f"<{type(self).__name__} {self.kind} {self.name or hex(id(self))}>"

    def _changed(self):
        """Called after any state change that affects rendering."""

    # Visibility

    def show(self):
        if self._shown:
            return
        self._shown = True
        self._changed()
        self.fire('show')

    def hide(self):
        if not self._shown:
            return
        self._shown = False
        self._changed()
        self.fire('hide')

    def is_shown(self):
        return self._shown

    def is_visible(self):
        """Return True if this frame and all of its parents are shown."""
        frame = self
        while frame is not None:
            if not frame._shown:
                return False
            frame = frame._parent
        return True

    def set_parent(self, parent):
        self._parent = parent
        self._changed()

    def get_parent(self):
        return self._parent

    # Geometry

    def set_point(self, point, relative_to=None, relative_point=None, x=0, y=0):
        """
        Attach one of this frame's anchor points to another frame.

        Args:
            point (str): Point on this frame, e.g. 'TOP'
            relative_to (Frame): Frame to anchor to, defaults to the parent
                or the screen
            relative_point (str): Point on relative_to, defaults to point
            x (float): Horizontal offset in pixels
            y (float): Vertical offset in pixels, positive is downward
        """
        relative_point = relative_point or point
        for name in (point, relative_point):
            if name not in ANCHOR_POINTS:
                raise ValueError(f"Unknown anchor point: {name!r}")
        self._points.append(Anchor(point, relative_to, relative_point, x, y))
        self._changed()

    def clear_all_points(self):
        self._points.clear()
        self._changed()

    @property
    def points(self):
        return tuple(self._points)

    def set_width(self, width):
        self._width = width
        self._changed()

    def set_height(self, height):
        self._height = height
        self._changed()

    def set_size(self, width, height):
        self._width = width
        self._height = height
        self._changed()

    def get_width(self):
        return self._width

    def get_height(self):
        return self._height

    def get_rect(self, _depth=0):
        """
        Resolve this frame's screen rectangle from its first anchor point.

        Returns:
            Rect: left, top, width and height in screen pixels
        """
        if _depth > MAX_ANCHOR_DEPTH:
            raise RuntimeError(f"Anchor chain too deep or cyclic at {self!r}")

        width, height = self._width, self._height
        if not self._points:
            if self._parent is None:
                return Rect(0, 0, width, height)
            parent_rect = self._parent.get_rect(_depth + 1)
            return Rect(parent_rect.left, parent_rect.top, width, height)

        anchor = self._points[0]
        target = anchor.relative_to or self._parent or self.host.screen
        target_rect = target.get_rect(_depth + 1)

        target_fx, target_fy = ANCHOR_POINTS[anchor.relative_point]
        own_fx, own_fy = ANCHOR_POINTS[anchor.point]
        anchor_x = target_rect.left + target_rect.width * target_fx + anchor.x
        anchor_y = target_rect.top + target_rect.height * target_fy + anchor.y
        return Rect(anchor_x - width * own_fx, anchor_y - height * own_fy, width, height)

    # Content

    def set_text(self, text):
        text = '' if text is None else str(text)
        if self.max_letters:
            text = text[:self.max_letters]
        if self.max_bytes:
            text = text.encode('utf-8')[:self.max_bytes].decode('utf-8', errors='ignore')
        self._text = text
        self._changed()

    def get_text(self):
        return self._text

    def input_text(self, text):
        """
        Store text the user typed, applying the edit box limits.

        Returns:
            bool: True if the limits cut the typed text short
        """
        Frame.set_text(self, text)
        return self._text != text

    @abstractmethod
    def get_text_width(self):
        """Return the rendered width of the frame's text in pixels."""

    @abstractmethod
    def get_text_height(self):
        """Return the rendered height of the frame's text in pixels."""

    def set_backdrop(self, backdrop):
        self.backdrop = backdrop
        self._changed()

    def set_texture(self, texture):
        self.texture = texture
        self._changed()

    def set_font(self, font):
        self.font = font
        self._changed()

    def set_checked(self, checked):
        self._checked = bool(checked)
        self._changed()

    def get_checked(self):
        return self._checked

    def set_max_letters(self, max_letters):
        self.max_letters = max_letters or 0

    def set_max_bytes(self, max_bytes):
        self.max_bytes = max_bytes or 0

    def set_auto_focus(self, auto_focus):
        self.auto_focus = bool(auto_focus)

    # Scripts

    def set_script(self, event, handler):
        if handler is None:
            self._scripts.pop(event, None)
        else:
            self._scripts[event] = handler

    def fire(self, event, *args):
        """Run the script bound to event, if any, and return its result."""
        handler = self._scripts.get(event)
        if handler is not None:
            return handler(*args)
        return None


class HostToolkit(ABC):
    """
    Abstract host UI toolkit.

    Besides frame creation the host exposes ambient state (player
    incapacitated, in cinematic), its own stack of default dialogs that
    LibDialog stacks beneath, and lifecycle hooks.

    Attributes:
        screen (Frame): Root frame covering the whole screen
        player_dead (bool): Ambient incapacitation state
        cinematic (bool): Ambient cinematic state
    """

    def __init__(self, screen_width=1920, screen_height=1080):
        self._hooks = {event: [] for event in HOOK_EVENTS}
        self._default_dialogs = []
        self.player_dead = False
        self.cinematic = False
        self.screen = self.create_frame('screen', 'UIParent')
        self.screen.set_size(screen_width, screen_height)
        self.screen.show()

    @abstractmethod
    def create_frame(self, kind, name=None, parent=None):
        """Create a new frame of the given kind."""

    @abstractmethod
    def play_sound(self, cue):
        """Play a named sound cue."""

    def is_player_dead(self):
        return self.player_dead

    def in_cinematic(self):
        return self.cinematic

    # Default dialog stack

    def default_dialogs(self):
        """Return the visible host default dialogs, top to bottom."""
        return [frame for frame in self._default_dialogs if frame.is_shown()]

    def push_default_dialog(self, frame):
        """Show one of the host's own dialogs at the bottom of its stack."""
        self._default_dialogs.append(frame)
        self._layout_default_dialogs()
        frame.show()
        self.fire_hook('default_dialog_repositioned')

    def pop_default_dialog(self, frame):
        """Hide one of the host's own dialogs and close the gap it leaves."""
        if frame in self._default_dialogs:
            self._default_dialogs.remove(frame)
        frame.hide()
        self._layout_default_dialogs()
        self.fire_hook('default_dialog_repositioned')
        self.fire_hook('default_dialog_hidden')

    def _layout_default_dialogs(self):
        previous = None
        for frame in self._default_dialogs:
            frame.clear_all_points()
            if previous is None:
                frame.set_point('TOP', self.screen, 'TOP', 0, DEFAULT_STACK_TOP_OFFSET)
            else:
                frame.set_point('TOP', previous, 'BOTTOM', 0, 0)
            previous = frame

    # Hooks

    def hook(self, event, callback):
        """
        Subscribe to a host lifecycle event.

        Args:
            event (str): One of HOOK_EVENTS
            callback (callable): Called with no arguments
        """
        if event not in self._hooks:
            raise ValueError(f"Unknown host event: {event!r}")
        self._hooks[event].append(callback)

    def fire_hook(self, event):
        logger.debug("Host event %s", event)
        for callback in list(self._hooks.get(event, ())):
            callback()
