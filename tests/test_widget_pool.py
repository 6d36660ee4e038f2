from libdialog.utils.widget_pool import WidgetPool
from libdialog.widgets import Button


def make_pool(host):
    return WidgetPool(lambda name: Button(host, name), "LibDialog_Button")


def test_acquire_creates_widgets_with_creation_order_names(host):
    pool = make_pool(host)

    first = pool.acquire()
    second = pool.acquire()

    assert first.name == "LibDialog_Button1"
    assert second.name == "LibDialog_Button2"
    assert pool.active == [first, second]
    assert pool.available == 0
    assert pool.created == 2


def test_released_widget_is_reused(host):
    pool = make_pool(host)
    widget = pool.acquire()

    pool.release(widget)
    assert widget not in pool
    assert pool.available == 1

    assert pool.acquire() is widget
    assert pool.created == 1
    assert pool.available == 0


def test_release_clears_anchor_points(host):
    pool = make_pool(host)
    widget = pool.acquire()
    widget.frame.set_point('CENTER')

    pool.release(widget)

    assert widget.frame.points == ()


def test_release_of_inactive_widget_is_a_no_op(host):
    pool = make_pool(host)
    widget = pool.acquire()
    pool.release(widget)

    pool.release(widget)
    pool.release(Button(host, "Stray"))

    assert pool.available == 1
    assert len(pool) == 0


def test_active_order_follows_acquisition(host):
    pool = make_pool(host)
    widgets = [pool.acquire() for _ in range(3)]

    pool.release(widgets[1])

    assert pool.active == [widgets[0], widgets[2]]
