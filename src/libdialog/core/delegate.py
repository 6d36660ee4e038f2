# src/libdialog/core/delegate.py
"""
Delegate records describing LibDialog dialogs.

A delegate is supplied by the caller once and reused for every dialog
spawned from it. Delegates hash by identity, which is what the spawn queue
uses to keep one pending entry per delegate.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Callable, List, Optional, Union

from .errors import DialogUsageError


@dataclass(eq=False)
class ButtonSpec:
    """A dialog button; shown only if it has both text and on_click."""
    text: Optional[str] = None
    on_click: Optional[Callable] = None


@dataclass(eq=False)
class CheckBoxSpec:
    """A dialog checkbox with optional value getter and setter."""
    label: Optional[str] = None
    get_value: Optional[Callable] = None
    set_value: Optional[Callable] = None


@dataclass(eq=False)
class EditBoxSpec:
    """A dialog edit box with an optional side label."""
    label: Optional[str] = None
    text: Optional[str] = None
    width: Optional[int] = None
    max_letters: int = 0
    max_bytes: int = 0
    auto_focus: bool = False
    on_enter_pressed: Optional[Callable] = None
    on_escape_pressed: Optional[Callable] = None
    on_text_changed: Optional[Callable] = None


@dataclass(eq=False)
class Delegate:
    """
    Describes the content, widgets and callbacks of a dialog.

    Attributes:
        text: Display text, or a callable taking the spawn data and
            returning it
        icon: Texture reference shown beside the text
        width (int): Width hint
        height (int): Height hint, used only with static_size
        static_size (bool): Use width/height verbatim instead of laying out
        buttons (list): Up to three ButtonSpec
        checkboxes (list): CheckBoxSpec list
        editboxes (list): EditBoxSpec list
        on_show: Called as on_show(dialog, data)
        on_hide: Called as on_hide(dialog, data)
        on_cancel: Called as on_cancel(dialog); dialog is None on a veto
        hide_on_escape (bool): Hide when the escape key is pressed
        cancel_ignores_escape (bool): Do not call on_cancel on escape
        show_while_dead (bool): Allow spawning while the player is dead
        show_during_cinematic (bool): Allow spawning during cinematics
        no_close_button (bool): Hide the close control
        sound: Sound cue played when the dialog is spawned
    """
    text: Union[str, Callable[[Any], str], None] = None
    icon: Any = None
    width: Optional[int] = None
    height: Optional[int] = None
    static_size: bool = False
    buttons: List[ButtonSpec] = field(default_factory=list)
    checkboxes: List[CheckBoxSpec] = field(default_factory=list)
    editboxes: List[EditBoxSpec] = field(default_factory=list)
    on_show: Optional[Callable] = None
    on_hide: Optional[Callable] = None
    on_cancel: Optional[Callable] = None
    hide_on_escape: bool = False
    cancel_ignores_escape: bool = False
    show_while_dead: bool = False
    show_during_cinematic: bool = False
    no_close_button: bool = False
    sound: Optional[str] = None

    def resolve_text(self, data=None):
        """Return the display text for the given spawn data."""
        text = self.text(data) if callable(self.text) else self.text
        return '' if text is None else str(text)

    @classmethod
    def from_mapping(cls, mapping):
        """
        Build a delegate from a plain mapping.

        Nested button, checkbox and edit box entries may be mappings too.

        Args:
            mapping (dict): Delegate attributes by name

        Returns:
            Delegate: The new delegate
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise DialogUsageError(
                "register", f"unknown delegate attributes: {', '.join(sorted(unknown))}"
            )

        values = dict(mapping)
        for key, spec_class in (('buttons', ButtonSpec),
                                ('checkboxes', CheckBoxSpec),
                                ('editboxes', EditBoxSpec)):
            try:
                values[key] = [
                    spec_class(**spec) if isinstance(spec, dict) else spec
                    for spec in values.get(key) or ()
                ]
            except TypeError as e:
                raise DialogUsageError("register", f"invalid {key} entry ({e})") from e
        return cls(**values)
