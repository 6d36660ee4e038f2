# src/libdialog/core/errors.py
"""
Exceptions raised by LibDialog.

Only caller bugs raise. Capacity queuing and ambient vetoes are ordinary
outcomes and return None instead.
"""

METHOD_USAGE_FORMAT = "{method}() - {reason}."


class LibDialogError(Exception):
    """Base class for LibDialog errors."""


class DialogUsageError(LibDialogError, ValueError):
    """A LibDialog method was called with invalid arguments."""

    def __init__(self, method, reason):
        super().__init__(METHOD_USAGE_FORMAT.format(method=method, reason=reason))
        self.method = method
        self.reason = reason


class UnknownDelegateError(LibDialogError, KeyError):
    """A dialog was spawned by a name nobody registered."""

    def __init__(self, method, name):
        super().__init__(name)
        self.method = method
        self.name = name

    def __str__(self):
        return METHOD_USAGE_FORMAT.format(
            method=self.method,
            reason=f'"{self.name}" does not match a registered delegate'
        )
