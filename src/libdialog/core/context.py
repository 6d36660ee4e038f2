# src/libdialog/core/context.py
"""
The LibDialog context.

A DialogContext owns every piece of dialog state for one host: the widget
pools and their active lists, the delegate registry and the spawn queue.
Create one at startup and route every dialog operation through it.
"""

from collections.abc import Mapping
import logging

from ..utils.config import merge_config
from ..utils.widget_pool import WidgetPool
from ..widgets import Button, CheckBox, EditBox
from .anchors import AnchorManager
from .builder import DialogBuilder
from .delegate import Delegate
from .errors import DialogUsageError
from .hooks import EventHooks
from .registry import Registry
from .spawn_queue import SpawnQueue

logger = logging.getLogger('libdialog.context')

WIDGET_PREFIX = "LibDialog_"


class DialogContext:
    """
    Registry, pools and spawn queue for one host toolkit.

    Attributes:
        host: Host toolkit the dialogs are drawn with
        config (dict): Merged configuration
        max_dialogs (int): Number of dialogs that may be shown at once
        registry (Registry): Named delegates
        dialog_pool (WidgetPool): Dialog pool; its active order is the stack
        button_pool (WidgetPool): Button pool
        checkbox_pool (WidgetPool): Checkbox pool
        editbox_pool (WidgetPool): Edit box pool
        anchors (AnchorManager): Positions the active dialogs
        queue (SpawnQueue): Spawns waiting for a free slot
        builder (DialogBuilder): Builds and releases dialogs
        hooks (EventHooks): Host event handlers
    """

    def __init__(self, host, config=None):
        """
        Initialize the context and subscribe to host events.

        Args:
            host: Host toolkit
            config (dict): Settings merged over DEFAULT_CONFIG
        """
        self.host = host
        self.config = merge_config(config)
        self.max_dialogs = self.config["max_dialogs"]

        self.registry = Registry()
        self.builder = DialogBuilder(self)
        self.dialog_pool = WidgetPool(self.builder.create_dialog, f"{WIDGET_PREFIX}Dialog")
        self.button_pool = WidgetPool(lambda name: Button(host, name), f"{WIDGET_PREFIX}Button")
        self.checkbox_pool = WidgetPool(lambda name: CheckBox(host, name), f"{WIDGET_PREFIX}CheckBox")
        self.editbox_pool = WidgetPool(lambda name: EditBox(host, name), f"{WIDGET_PREFIX}EditBox")

        self.anchors = AnchorManager(host, self.dialog_pool, self.config["screen_top_offset"])
        self.queue = SpawnQueue(self)
        self.hooks = EventHooks(self)
        self.hooks.install()

    @property
    def active_dialogs(self):
        """Active dialogs, top of the stack first."""
        return self.dialog_pool.active

    @property
    def at_capacity(self):
        return len(self.dialog_pool) >= self.max_dialogs

    def register(self, name, delegate):
        """
        Register a delegate under a name.

        Args:
            name (str): Non-empty key; an existing registration is replaced
            delegate (Delegate or Mapping): Dialog description

        Returns:
            Delegate: The registered delegate
        """
        return self.registry.register(name, delegate)

    def _resolve(self, method, reference):
        if isinstance(reference, Delegate):
            return reference
        if isinstance(reference, str) and reference:
            return self.registry.get(reference, method)
        if isinstance(reference, Mapping):
            raise DialogUsageError(method, "register a mapping with register() and pass its name")
        raise DialogUsageError(method, "reference must be a Delegate or a non-empty string")

    def _vetoed(self, delegate):
        if self.host.is_player_dead() and not delegate.show_while_dead:
            return "player is dead"
        if self.host.in_cinematic() and not delegate.show_during_cinematic:
            return "cinematic is playing"
        return None

    def spawn(self, reference, data=None):
        """
        Show a dialog for a delegate.

        Args:
            reference (str or Delegate): Registered name or a delegate
            data: Payload handed back to every delegate callback

        Returns:
            Dialog: The shown dialog, or None if the spawn was vetoed or
                queued

        Raises:
            DialogUsageError: Malformed reference or empty dialog text
            UnknownDelegateError: Unregistered name
        """
        delegate = self._resolve("spawn", reference)

        reason = self._vetoed(delegate)
        if reason:
            logger.debug("Spawn cancelled: %s", reason)
            if delegate.on_cancel:
                delegate.on_cancel(None)
            return None

        dialog = self.builder.build(delegate, data)
        if dialog is None:
            return None

        if delegate.sound:
            self.host.play_sound(delegate.sound)

        self.anchors.anchor(dialog)
        dialog.show()
        return dialog

    def hide(self, dialog):
        """Hide an active dialog, recycling it and draining the queue."""
        dialog.hide()

    def _matches(self, dialog, delegate, data):
        return dialog.delegate is delegate and (data is None or dialog.data == data)

    def active_dialog(self, reference, data=None):
        """
        Find an active dialog spawned from a delegate.

        Args:
            reference (str or Delegate): Registered name or a delegate
            data: If given, only a dialog with equal data matches

        Returns:
            Dialog: The topmost match, or None
        """
        delegate = self._resolve("active_dialog", reference)
        for dialog in self.dialog_pool.active:
            if self._matches(dialog, delegate, data):
                return dialog
        return None

    def dismiss(self, reference, data=None):
        """
        Hide every active dialog spawned from a delegate.

        Queued spawns of the delegate are left alone.

        Args:
            reference (str or Delegate): Registered name or a delegate
            data: If given, only dialogs with equal data are hidden

        Returns:
            int: Number of dialogs hidden
        """
        delegate = self._resolve("dismiss", reference)
        targets = [dialog for dialog in self.dialog_pool.active if self._matches(dialog, delegate, data)]
        hidden = 0
        for dialog in targets:
            # Hiding drains the queue, which may have reused this dialog
            if dialog.delegate is delegate:
                dialog.hide()
                hidden += 1
        return hidden
