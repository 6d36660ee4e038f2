# src/libdialog/core/registry.py
"""
Name to delegate mapping for LibDialog.
"""

from collections.abc import Mapping

from .delegate import Delegate
from .errors import DialogUsageError, UnknownDelegateError


class Registry:
    """Delegates registered under string keys; re-registering overwrites."""

    def __init__(self):
        self._delegates = {}

    def register(self, name, delegate):
        """
        Store a delegate under name.

        Args:
            name (str): Non-empty key
            delegate (Delegate or Mapping): Delegate, or a mapping of its
                attributes

        Returns:
            Delegate: The stored delegate
        """
        if not isinstance(name, str) or not name:
            raise DialogUsageError("register", "delegate_name must be a non-empty string")

        if isinstance(delegate, Mapping):
            delegate = Delegate.from_mapping(delegate)
        elif not isinstance(delegate, Delegate):
            raise DialogUsageError("register", "delegate must be a Delegate or a mapping")

        self._delegates[name] = delegate
        return delegate

    def get(self, name, method="spawn"):
        try:
            return self._delegates[name]
        except KeyError:
            raise UnknownDelegateError(method, name) from None

    def names(self):
        return list(self._delegates)

    def __contains__(self, name):
        return name in self._delegates

    def __len__(self):
        return len(self._delegates)
