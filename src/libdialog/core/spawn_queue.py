# src/libdialog/core/spawn_queue.py
"""
Deferred spawns for LibDialog.

When the dialog limit is reached, further spawn requests wait here and are
replayed as soon as a dialog slot frees up.
"""

from collections import deque
import logging

logger = logging.getLogger('libdialog.queue')


class SpawnQueue:
    """
    Backlog of (delegate, data) pairs waiting for a free dialog slot.

    Each delegate is queued at most once; while it waits, further requests
    for it are dropped and the first payload is kept. Entries are replayed
    in the order they were queued.

    Attributes:
        _context (DialogContext): Used to check capacity and to spawn
        _backlog (collections.deque): Delegates in queue order
        _pending (dict): Payload for each queued delegate
    """

    def __init__(self, context):
        self._context = context
        self._backlog = deque()
        self._pending = {}

    def enqueue(self, delegate, data=None):
        """
        Queue a delegate for a later spawn.

        Args:
            delegate (Delegate): Delegate to spawn
            data: Spawn payload; an empty string is stored as None

        Returns:
            bool: True if queued, False if the delegate was already waiting
        """
        if delegate in self._pending:
            return False
        if isinstance(data, str) and not data:
            data = None
        self._backlog.append(delegate)
        self._pending[delegate] = data
        return True

    def pop(self):
        """Remove and return the oldest (delegate, data) pair."""
        delegate = self._backlog.popleft()
        return delegate, self._pending.pop(delegate)

    def drain(self):
        """
        Spawn queued delegates until the queue or the free slots run out.

        Returns:
            list: Dialogs spawned by this call
        """
        spawned = []
        while self._backlog and not self._context.at_capacity:
            delegate, data = self.pop()
            logger.debug("Spawning queued delegate %r", delegate)
            dialog = self._context.spawn(delegate, data)
            if dialog is not None:
                spawned.append(dialog)
        return spawned

    def pending(self):
        """Queued (delegate, data) pairs, oldest first."""
        return [(delegate, self._pending[delegate]) for delegate in self._backlog]

    def __len__(self):
        return len(self._backlog)

    def __contains__(self, delegate):
        return delegate in self._pending
