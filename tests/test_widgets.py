from libdialog import ButtonSpec, CheckBoxSpec, EditBoxSpec


def test_button_click_reaches_spec_with_data(context, host, make_delegate, recorder):
    on_click = recorder()
    dialog = context.spawn(make_delegate(buttons=[ButtonSpec("Okay", on_click)]), "payload")
    button = dialog.buttons[0]

    host.click(button.frame, 'RightButton', True)

    assert on_click.calls == [(button, 'RightButton', True, "payload")]


def test_recycled_button_follows_new_owner(context, host, make_delegate, recorder):
    old_click, new_click = recorder(), recorder()
    first = context.spawn(make_delegate(buttons=[ButtonSpec("Old", old_click)]), "old")
    button = first.buttons[0]
    first.hide()

    second = context.spawn(make_delegate(buttons=[ButtonSpec("New", new_click)]), "new")
    assert second.buttons[0] is button
    assert button.frame.get_text() == "New"

    host.click(button.frame)

    assert old_click.calls == []
    assert new_click.calls == [(button, 'LeftButton', False, "new")]


def test_click_on_pooled_button_does_nothing(context, host, make_delegate, recorder):
    on_click = recorder()
    dialog = context.spawn(make_delegate(buttons=[ButtonSpec("Okay", on_click)]))
    button = dialog.buttons[0]
    dialog.hide()

    host.click(button.frame)

    assert on_click.calls == []


def test_button_handler_may_hide_its_dialog(context, host, make_delegate, recorder):
    on_hide = recorder()
    dialog = context.spawn(make_delegate(
        buttons=[ButtonSpec("Close", lambda button, *args: button.dialog.hide())],
        on_hide=on_hide,
    ))

    host.click(dialog.buttons[0].frame)

    assert on_hide.calls == [(dialog, None)]
    assert context.active_dialogs == []


def test_checkbox_reads_and_writes_values(context, host, make_delegate, recorder):
    settings = {"remember": True}
    set_value = recorder()
    dialog = context.spawn(make_delegate(checkboxes=[
        CheckBoxSpec("Remember", lambda checkbox, data: data["remember"], set_value),
        CheckBoxSpec("Plain"),
    ]), settings)
    remember, plain = dialog.checkboxes

    assert remember.get_checked()
    assert not plain.get_checked()
    assert remember.frame.get_text() == "Remember"

    host.click(remember.frame)
    host.click(plain.frame)

    assert set_value.calls == [(remember, False, settings, 'LeftButton', False)]
    assert plain.get_checked()


def test_recycled_checkbox_takes_new_initial_state(context, host, make_delegate):
    first = context.spawn(make_delegate(checkboxes=[CheckBoxSpec("A", lambda checkbox, data: True)]))
    checkbox = first.checkboxes[0]
    first.hide()

    second = context.spawn(make_delegate(checkboxes=[CheckBoxSpec("B")]))

    assert second.checkboxes[0] is checkbox
    assert not checkbox.get_checked()


def test_edit_box_callbacks_receive_data(context, host, make_delegate, recorder):
    on_enter, on_escape, on_changed = recorder(), recorder(), recorder()
    dialog = context.spawn(make_delegate(editboxes=[EditBoxSpec(
        text="initial",
        on_enter_pressed=on_enter,
        on_escape_pressed=on_escape,
        on_text_changed=on_changed,
    )]), 42)
    editbox = dialog.editboxes[0]

    assert editbox.get_text() == "initial"

    host.type_text(editbox.frame, "typed")
    editbox.frame.fire('enter_pressed')
    editbox.frame.fire('escape_pressed')

    assert editbox.get_text() == "typed"
    assert on_changed.calls == [(editbox, 42)]
    assert on_enter.calls == [(editbox, 42)]
    assert on_escape.calls == [(editbox, 42)]


def test_edit_box_limits_apply_to_typed_text(context, host, make_delegate):
    dialog = context.spawn(make_delegate(editboxes=[EditBoxSpec(max_letters=5, auto_focus=True)]))
    editbox = dialog.editboxes[0]

    host.type_text(editbox.frame, "abcdefgh")

    assert editbox.get_text() == "abcde"
    assert editbox.frame.auto_focus


def test_recycled_edit_box_drops_previous_limits(context, host, make_delegate):
    first = context.spawn(make_delegate(editboxes=[EditBoxSpec(label="Name:", max_letters=2)]))
    editbox = first.editboxes[0]
    first.hide()

    second = context.spawn(make_delegate(editboxes=[EditBoxSpec(text="long text")]))

    assert second.editboxes[0] is editbox
    assert editbox.get_text() == "long text"
    assert not editbox.has_label


def test_close_button_cancels_and_hides(context, host, make_delegate, recorder):
    on_cancel, on_hide = recorder(), recorder()
    dialog = context.spawn(make_delegate(on_cancel=on_cancel, on_hide=on_hide), "data")

    assert dialog.close_button.is_shown()
    host.click(dialog.close_button)

    assert on_cancel.calls == [(dialog,)]
    assert on_hide.calls == [(dialog, "data")]
    assert dialog not in context.active_dialogs


def test_close_button_can_be_suppressed(context, make_delegate):
    dialog = context.spawn(make_delegate(no_close_button=True))
    assert not dialog.close_button.is_shown()
    dialog.hide()

    reused = context.spawn(make_delegate())

    assert reused is dialog
    assert reused.close_button.is_shown()


def test_close_button_keeps_queued_dialog_that_reused_it(context, host, make_delegate, recorder):
    dialogs = [context.spawn(make_delegate(on_cancel=lambda dialog: dialog.hide())) for _ in range(4)]
    on_hide = recorder()
    waiting = make_delegate(on_hide=on_hide)
    context.spawn(waiting, "queued")

    host.click(dialogs[0].close_button)

    assert dialogs[0].delegate is waiting
    assert dialogs[0].is_shown()
    assert on_hide.calls == []
    assert [dialog.delegate for dialog in context.active_dialogs][-1] is waiting


def test_typed_text_is_cut_to_byte_limit(context, host, make_delegate, recorder):
    seen = []
    dialog = context.spawn(make_delegate(editboxes=[EditBoxSpec(
        max_bytes=3,
        on_text_changed=lambda editbox, data: seen.append(editbox.get_text()),
    )]))
    editbox = dialog.editboxes[0]

    assert editbox.frame.input_text("ééé")
    assert not editbox.frame.input_text("é")

    host.type_text(editbox.frame, "ééé")

    assert editbox.get_text() == "é"
    assert seen == ["é"]
