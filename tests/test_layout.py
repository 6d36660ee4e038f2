from libdialog import ButtonSpec, CheckBoxSpec, EditBoxSpec


def noop(*args):
    pass


def test_plain_dialog_size(context, make_delegate):
    dialog = context.spawn(make_delegate(text="Hello"))

    assert dialog.frame.get_width() == 320
    assert dialog.text.get_width() == 290
    assert dialog.frame.get_height() == 32 + 14


def test_long_text_wraps_and_grows_height(context, make_delegate):
    dialog = context.spawn(make_delegate(text="x" * 100))

    # 290px wide text holds 41 characters per line
    assert dialog.frame.get_height() == 32 + 3 * 14


def test_static_size_uses_hints_verbatim(context, make_delegate):
    dialog = context.spawn(make_delegate(
        static_size=True,
        width=500,
        height=0,
        buttons=[ButtonSpec("Okay", noop)],
    ))

    assert dialog.frame.get_width() == 500
    assert dialog.frame.get_height() == 72


def test_static_size_ignores_non_positive_width(context, make_delegate):
    dialog = context.spawn(make_delegate(static_size=True, width=-1, height=90))

    assert dialog.frame.get_width() == 320
    assert dialog.frame.get_height() == 90


def test_three_buttons_widen_dialog_and_chain(context, make_delegate):
    dialog = context.spawn(make_delegate(buttons=[
        ButtonSpec("Yes", noop),
        ButtonSpec("No", noop),
        ButtonSpec("Maybe", noop),
    ]))

    assert len(dialog.buttons) == 3
    assert dialog.frame.get_width() == 440
    assert dialog.frame.get_height() == 32 + 14 + 8 + 21

    first, second, third = dialog.buttons
    assert first.frame.points[0] == ('BOTTOMRIGHT', dialog.frame, 'BOTTOM', -72, -16)
    assert second.frame.points[0] == ('LEFT', first.frame, 'RIGHT', 13, 0)
    assert third.frame.points[0] == ('LEFT', second.frame, 'RIGHT', 13, 0)

    first_rect = first.frame.get_rect()
    second_rect = second.frame.get_rect()
    assert second_rect.left == first_rect.left + first_rect.width + 13
    assert second_rect.top == first_rect.top


def test_first_button_anchor_depends_on_button_count(context, make_delegate):
    single = context.spawn(make_delegate(buttons=[ButtonSpec("Okay", noop)]))
    double = context.spawn(make_delegate(buttons=[ButtonSpec("Okay", noop), ButtonSpec("Cancel", noop)]))

    assert single.buttons[0].frame.points[0] == ('BOTTOM', single.frame, 'BOTTOM', 0, -16)
    assert double.buttons[0].frame.points[0] == ('BOTTOMRIGHT', double.frame, 'BOTTOM', -6, -16)
    assert single.frame.get_width() == 320


def test_button_width_fits_text(context, make_delegate):
    dialog = context.spawn(make_delegate(buttons=[
        ButtonSpec("Ok", noop),
        ButtonSpec("A rather long label", noop),
    ]))

    assert dialog.buttons[0].frame.get_width() == 120
    assert dialog.buttons[1].frame.get_width() == 19 * 7 + 20


def test_incomplete_buttons_are_skipped(context, make_delegate):
    dialog = context.spawn(make_delegate(buttons=[
        ButtonSpec("No handler"),
        ButtonSpec("Okay", noop),
        ButtonSpec(None, noop),
    ]))

    assert len(dialog.buttons) == 1
    assert dialog.buttons[0].index == 2
    assert dialog.frame.get_width() == 320


def test_at_most_three_buttons(context, make_delegate):
    dialog = context.spawn(make_delegate(buttons=[ButtonSpec(str(i), noop) for i in range(5)]))

    assert len(dialog.buttons) == 3


def test_wide_edit_box_widens_dialog(context, make_delegate):
    dialog = context.spawn(make_delegate(editboxes=[EditBoxSpec(width=300)]))

    assert dialog.frame.get_width() == 320 + 40
    assert dialog.frame.get_height() == 32 + 14 + 24


def test_edit_box_label_overflow_widens_dialog(context, make_delegate):
    dialog = context.spawn(make_delegate(editboxes=[EditBoxSpec(label="A very long label text")]))

    label_width = 22 * 7
    assert dialog.frame.get_width() == 130 + 2 * (10 + 8 + label_width + 16)


def test_edit_box_near_right_edge_widens_dialog(context, make_delegate):
    dialog = context.spawn(make_delegate(width=200, editboxes=[EditBoxSpec(width=270)]))

    assert dialog.frame.get_width() == 270 + 2 * (10 + 16)


def test_edit_boxes_stack_below_text(context, make_delegate):
    dialog = context.spawn(make_delegate(editboxes=[
        EditBoxSpec(label="Name:"),
        EditBoxSpec(),
    ]))

    first, second = dialog.editboxes
    assert first.has_label
    assert not second.has_label
    assert first.frame.points[0] == ('TOP', dialog.text, 'BOTTOM', 0, 16)
    assert second.frame.points[0] == ('TOP', dialog.text, 'BOTTOM', 0, 16 + 24)
    assert dialog.frame.get_height() == 32 + 14 + 2 * 24


def test_unlabeled_edit_box_sits_closer_to_text(context, make_delegate):
    dialog = context.spawn(make_delegate(editboxes=[EditBoxSpec()]))

    assert dialog.editboxes[0].frame.points[0] == ('TOP', dialog.text, 'BOTTOM', 0, 8)


def test_checkboxes_are_boxed_below_last_edit_box(context, make_delegate):
    dialog = context.spawn(make_delegate(
        editboxes=[EditBoxSpec()],
        checkboxes=[CheckBoxSpec("One"), CheckBoxSpec("Three")],
    ))

    container = dialog.checkbox_container
    first, second = dialog.checkboxes
    assert container.is_shown()
    assert container.get_width() == 32 + 4 + 5 * 7
    assert container.get_height() == 64
    assert container.points[0] == ('TOP', dialog.editboxes[0].frame, 'BOTTOM', 0, 0)
    assert first.frame.points[0] == ('TOPLEFT', container, 'TOPLEFT', 0, 0)
    assert second.frame.points[0] == ('TOPLEFT', first.frame, 'BOTTOMLEFT', 0, 0)
    assert dialog.frame.get_height() == 32 + 14 + 24 + 64


def test_checkboxes_without_edit_boxes_sit_below_text(context, make_delegate):
    dialog = context.spawn(make_delegate(checkboxes=[CheckBoxSpec("Only")]))

    assert dialog.checkbox_container.points[0] == ('TOP', dialog.text, 'BOTTOM', 0, 0)


def test_icon_pads_width_and_narrows_text(context, make_delegate):
    dialog = context.spawn(make_delegate(icon="quest-icon"))

    assert dialog.icon.is_shown()
    assert dialog.icon.texture == "quest-icon"
    assert dialog.frame.get_width() == 320 + 72
    assert dialog.text.get_width() == 392 - 144


def test_recycled_dialog_loses_previous_layout(context, make_delegate):
    wide = context.spawn(make_delegate(icon="quest-icon", buttons=[
        ButtonSpec("Yes", noop), ButtonSpec("No", noop), ButtonSpec("Maybe", noop),
    ]))
    wide.hide()

    plain = context.spawn(make_delegate())

    assert plain is wide
    assert not plain.icon.is_shown()
    assert plain.frame.get_width() == 320
    assert plain.buttons == []
