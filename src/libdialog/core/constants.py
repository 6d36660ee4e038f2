# src/libdialog/core/constants.py
"""
Geometry and limits shared by the LibDialog core.
"""

MAX_BUTTONS = 3

DEFAULT_DIALOG_WIDTH = 320
DEFAULT_DIALOG_HEIGHT = 72
DEFAULT_DIALOG_TEXT_WIDTH = 290
DIALOG_TEXT_TOP = 16
DIALOG_TEXT_MARGIN = 32
DIALOG_TEXT_SIDE_MARGIN = 30
THREE_BUTTON_DIALOG_WIDTH = 440

DEFAULT_DIALOG_BACKDROP = {
    "background": "dialog-background",
    "edge": "dialog-border",
    "tile": True,
    "tile_size": 32,
    "edge_size": 32,
    "insets": {"left": 11, "right": 12, "top": 12, "bottom": 11},
}

CLOSE_BUTTON_SIZE = 32
CLOSE_BUTTON_INSET = 3

DEFAULT_ICON_SIZE = 36
ICON_PADDING = DEFAULT_ICON_SIZE * 2
ICON_LEFT_INSET = 24

DEFAULT_BUTTON_WIDTH = 128
DEFAULT_BUTTON_HEIGHT = 21
MIN_BUTTON_WIDTH = 120
BUTTON_TEXT_PADDING = 20
BUTTON_SPACING = 13
BUTTON_BOTTOM_INSET = 16
BUTTON_ROW_GAP = 8

# Anchor of the first button by number of buttons: (point, x offset)
FIRST_BUTTON_ANCHORS = {
    1: ('BOTTOM', 0),
    2: ('BOTTOMRIGHT', -6),
    3: ('BOTTOMRIGHT', -72),
}

DEFAULT_EDITBOX_WIDTH = 130
DEFAULT_EDITBOX_HEIGHT = 24
EDITBOX_WIDEN_THRESHOLD = 260
EDITBOX_TOP_GAP = 8
EDITBOX_LABELED_TOP_GAP = 16
EDITBOX_LABEL_GAP = 8
EDITBOX_BORDER = 10
EDITBOX_EDGE_TOLERANCE = 16
EDITBOX_FONT = "ChatFontNormal"

DEFAULT_CHECKBOX_SIZE = 32
CHECKBOX_LABEL_GAP = 4
