import pytest

from libdialog import DialogContext, Delegate, HeadlessHost


@pytest.fixture
def host():
    return HeadlessHost()


@pytest.fixture
def context(host):
    return DialogContext(host, {"max_dialogs": 4})


@pytest.fixture
def make_delegate():
    """Build delegates with distinct text."""
    counter = iter(range(1, 1000))

    def make(**kwargs):
        kwargs.setdefault("text", f"Dialog {next(counter)}")
        return Delegate(**kwargs)

    return make


class Recorder:
    """Callable recording every call it receives."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


@pytest.fixture
def recorder():
    return Recorder
