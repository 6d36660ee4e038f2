# src/libdialog/widgets/dialog.py
"""
The pooled dialog container.
"""

from ..core.constants import (
    CLOSE_BUTTON_INSET,
    CLOSE_BUTTON_SIZE,
    DEFAULT_DIALOG_BACKDROP,
    DEFAULT_DIALOG_HEIGHT,
    DEFAULT_DIALOG_TEXT_WIDTH,
    DEFAULT_DIALOG_WIDTH,
    DEFAULT_ICON_SIZE,
    DIALOG_TEXT_TOP,
    ICON_LEFT_INSET,
)
from ..core.layout import resize


class Dialog:
    """
    A recyclable dialog bound to one delegate and data payload at a time.

    The close control, text label, icon and checkbox container are built
    once with the dialog and kept for its whole life; buttons, checkboxes
    and edit boxes are borrowed from their pools while the dialog is active.

    Attributes:
        name (str): Stable creation-order name
        frame: Host frame of the dialog itself
        close_button: Close control frame
        text: Font string holding the display text
        icon: Texture frame shown beside the text
        checkbox_container: Frame boxing the checkboxes
        delegate (Delegate): Current delegate, None while pooled
        data: Current spawn data
        buttons (list): Attached Button widgets
        checkboxes (list): Attached CheckBox widgets
        editboxes (list): Attached EditBox widgets
    """

    def __init__(self, host, name, on_show, on_hide, on_close):
        """
        Build the dialog's permanent frames.

        Args:
            host: Host toolkit
            name (str): Creation-order name
            on_show (callable): Called with the dialog when it is shown
            on_hide (callable): Called with the dialog when it is hidden
            on_close (callable): Called with the dialog when the close
                control is clicked
        """
        self.host = host
        self.name = name
        self._on_show = on_show
        self._on_hide = on_hide
        self._on_close = on_close

        self.frame = host.create_frame('dialog', name, host.screen)
        self.frame.set_script('show', self._handle_show)
        self.frame.set_script('hide', self._handle_hide)

        self.close_button = host.create_frame('close', f"{name}CloseButton", self.frame)
        self.close_button.set_size(CLOSE_BUTTON_SIZE, CLOSE_BUTTON_SIZE)
        self.close_button.set_point('TOPRIGHT', self.frame, 'TOPRIGHT', -CLOSE_BUTTON_INSET, CLOSE_BUTTON_INSET)
        self.close_button.set_script('click', self._handle_close)

        self.text = host.create_frame('fontstring', f"{name}Text", self.frame)
        self.text.set_point('TOP', self.frame, 'TOP', 0, DIALOG_TEXT_TOP)
        self.text.show()

        self.icon = host.create_frame('texture', f"{name}Icon", self.frame)
        self.icon.set_size(DEFAULT_ICON_SIZE, DEFAULT_ICON_SIZE)
        self.icon.set_point('LEFT', self.frame, 'LEFT', ICON_LEFT_INSET, 0)

        self.checkbox_container = host.create_frame('container', f"{name}CheckBoxContainer", self.frame)

        self.delegate = None
        self.data = None
        self.buttons = []
        self.checkboxes = []
        self.editboxes = []

    def __repr__(self):
        return f"<Dialog {self.name}>"

    def reset(self):
        """Restore the default look before the dialog is reused."""
        self.frame.set_size(DEFAULT_DIALOG_WIDTH, DEFAULT_DIALOG_HEIGHT)
        self.frame.set_backdrop(DEFAULT_DIALOG_BACKDROP)

        self.text.set_width(DEFAULT_DIALOG_TEXT_WIDTH)
        self.text.set_text('')

        self.icon.set_texture(None)
        self.icon.hide()

        self.close_button.show()

        self.checkbox_container.clear_all_points()
        self.checkbox_container.set_size(0, 0)
        self.checkbox_container.hide()

        self.buttons = []
        self.checkboxes = []
        self.editboxes = []

    def resize(self):
        resize(self)

    def show(self):
        self.frame.show()

    def hide(self):
        self.frame.hide()

    def is_shown(self):
        return self.frame.is_shown()

    def _handle_show(self):
        self._on_show(self)

    def _handle_hide(self):
        self._on_hide(self)

    def _handle_close(self, input_device='LeftButton', pressed=False):
        self._on_close(self)
