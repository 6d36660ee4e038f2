# src/libdialog/utils/widget_pool.py
"""
Widget pooling utilities for LibDialog.

Dialogs, buttons, checkboxes and edit boxes are never destroyed. Each kind
has a pool holding a free list of idle widgets and an ordered list of the
widgets currently in use.
"""

from collections import deque
import logging

logger = logging.getLogger('libdialog.pool')


class WidgetPool:
    """
    Manages a pool of reusable widgets of one kind.

    Widgets are created lazily through a factory the first time the free
    list is empty, and recycled for the rest of the process.

    Attributes:
        _factory (callable): Called with a widget name to build a new widget
        _prefix (str): Name prefix; widgets are named prefix + creation index
        _pool (collections.deque): Idle widgets, order irrelevant
        _active (list): Widgets in use, in acquisition order
        _created (int): Number of widgets built so far
    """

    def __init__(self, factory, prefix):
        """
        Initialize the widget pool.

        Args:
            factory (callable): Builds a widget given its name
            prefix (str): Name prefix for created widgets
        """
        self._factory = factory
        self._prefix = prefix
        self._pool = deque()
        self._active = []
        self._created = 0

    def _create_widget(self):
        """Create a new widget instance."""
        self._created += 1
        name = f"{self._prefix}{self._created}"
        logger.debug("Creating %s", name)
        return self._factory(name)

    def acquire(self):
        """
        Get a widget from the pool and mark it active.

        Returns:
            A widget instance, either from the pool or newly created
        """
        if self._pool:
            widget = self._pool.pop()
        else:
            widget = self._create_widget()
        self._active.append(widget)
        return widget

    def release(self, widget):
        """
        Return a widget to the pool.

        Releasing a widget that is not active does nothing.

        Args:
            widget: Widget instance to return to the pool
        """
        try:
            self._active.remove(widget)
        except ValueError:
            logger.debug("Ignoring release of inactive widget %r", widget)
            return
        widget.frame.clear_all_points()
        self._pool.append(widget)

    @property
    def active(self):
        """Active widgets in acquisition order."""
        return list(self._active)

    @property
    def available(self):
        """Number of idle widgets in the free list."""
        return len(self._pool)

    @property
    def created(self):
        """Number of widgets built over the pool's lifetime."""
        return self._created

    def __len__(self):
        return len(self._active)

    def __contains__(self, widget):
        return widget in self._active
