# src/libdialog/core/layout.py
"""
Dialog layout for LibDialog.

Child widgets are placed when a dialog is built; resize() then derives the
dialog's own size from whatever ended up attached to it.
"""

from .constants import (
    BUTTON_BOTTOM_INSET,
    BUTTON_ROW_GAP,
    BUTTON_SPACING,
    CHECKBOX_LABEL_GAP,
    DEFAULT_CHECKBOX_SIZE,
    DEFAULT_DIALOG_HEIGHT,
    DEFAULT_DIALOG_WIDTH,
    DEFAULT_EDITBOX_HEIGHT,
    DIALOG_TEXT_MARGIN,
    DIALOG_TEXT_SIDE_MARGIN,
    EDITBOX_BORDER,
    EDITBOX_EDGE_TOLERANCE,
    EDITBOX_LABEL_GAP,
    EDITBOX_LABELED_TOP_GAP,
    EDITBOX_TOP_GAP,
    EDITBOX_WIDEN_THRESHOLD,
    FIRST_BUTTON_ANCHORS,
    ICON_PADDING,
    MAX_BUTTONS,
    THREE_BUTTON_DIALOG_WIDTH,
)


def place_buttons(dialog):
    """Anchor the dialog's buttons in a row along its bottom edge."""
    count = len(dialog.buttons)
    previous = None
    for button in dialog.buttons:
        frame = button.frame
        frame.clear_all_points()
        if previous is None:
            point, x_offset = FIRST_BUTTON_ANCHORS[count]
            frame.set_point(point, dialog.frame, 'BOTTOM', x_offset, -BUTTON_BOTTOM_INSET)
        else:
            frame.set_point('LEFT', previous.frame, 'RIGHT', BUTTON_SPACING, 0)
        previous = button


def place_editboxes(dialog):
    """Stack the dialog's edit boxes below its text."""
    if not dialog.editboxes:
        return

    # A side label on the first box needs extra room under the text
    top_gap = EDITBOX_LABELED_TOP_GAP if dialog.editboxes[0].has_label else EDITBOX_TOP_GAP
    for position, editbox in enumerate(dialog.editboxes):
        editbox.frame.clear_all_points()
        editbox.frame.set_point('TOP', dialog.text, 'BOTTOM', 0, top_gap + DEFAULT_EDITBOX_HEIGHT * position)


def place_checkboxes(dialog):
    """Box the dialog's checkboxes below its last edit box or its text."""
    container = dialog.checkbox_container
    container.clear_all_points()
    if not dialog.checkboxes:
        container.hide()
        return

    widest = max(checkbox.frame.get_text_width() for checkbox in dialog.checkboxes)
    container.set_size(
        DEFAULT_CHECKBOX_SIZE + CHECKBOX_LABEL_GAP + widest,
        DEFAULT_CHECKBOX_SIZE * len(dialog.checkboxes)
    )
    above = dialog.editboxes[-1].frame if dialog.editboxes else dialog.text
    container.set_point('TOP', above, 'BOTTOM', 0, 0)
    container.show()

    previous = None
    for checkbox in dialog.checkboxes:
        checkbox.frame.clear_all_points()
        if previous is None:
            checkbox.frame.set_point('TOPLEFT', container, 'TOPLEFT', 0, 0)
        else:
            checkbox.frame.set_point('TOPLEFT', previous.frame, 'BOTTOMLEFT', 0, 0)
        previous = checkbox


def _fit_editboxes(dialog, width):
    """Return width widened so every edit box and its label fit."""
    base_width = width
    for editbox in dialog.editboxes:
        box_width = editbox.frame.get_width()
        if box_width > EDITBOX_WIDEN_THRESHOLD:
            width = max(width, base_width + box_width - EDITBOX_WIDEN_THRESHOLD)

        # Boxes are centered, so each side needs half the box plus margins
        if editbox.has_label:
            label_width = editbox.label.get_text_width()
            needed = box_width + 2 * (EDITBOX_BORDER + EDITBOX_LABEL_GAP + label_width + EDITBOX_EDGE_TOLERANCE)
            if needed > width:
                width = needed

        needed = box_width + 2 * (EDITBOX_BORDER + EDITBOX_EDGE_TOLERANCE)
        if needed > width:
            width = needed
    return width


def _apply_size(frame, width, height):
    if width > 0:
        frame.set_width(width)
    if height > 0:
        frame.set_height(height)


def resize(dialog):
    """
    Compute and apply a dialog's size from its delegate and widgets.

    Args:
        dialog (Dialog): A dialog bound to a delegate
    """
    delegate = dialog.delegate
    width = DEFAULT_DIALOG_WIDTH if delegate.width is None else delegate.width
    height = DEFAULT_DIALOG_HEIGHT if delegate.height is None else delegate.height

    # Static size ignores widgets for resizing purposes
    if delegate.static_size:
        _apply_size(dialog.frame, width, height)
        return

    if len(dialog.buttons) == MAX_BUTTONS:
        width = THREE_BUTTON_DIALOG_WIDTH
    else:
        width = _fit_editboxes(dialog, width)

    if dialog.icon.is_shown():
        width += ICON_PADDING
        dialog.text.set_width(max(0, width - ICON_PADDING * 2))
    else:
        dialog.text.set_width(max(0, width - DIALOG_TEXT_SIDE_MARGIN))

    height = DIALOG_TEXT_MARGIN + dialog.text.get_text_height()
    if dialog.buttons:
        height += BUTTON_ROW_GAP + dialog.buttons[0].frame.get_height()
    height += DEFAULT_EDITBOX_HEIGHT * len(dialog.editboxes)
    height += DEFAULT_CHECKBOX_SIZE * len(dialog.checkboxes)

    _apply_size(dialog.frame, width, height)
