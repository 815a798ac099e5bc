# tests/test_screens.py

import pytest
from PySide6.QtCore import QCoreApplication, QEvent
from PySide6.QtWidgets import QDialog, QLabel, QPushButton

from todo_app.core.notifier import KIND_ERROR, KIND_SUCCESS
from todo_app.models.data_models import Priority, TaskForm, TaskStatus
from todo_app.ui.main_window import ROUTE_LOGIN, ROUTE_REGISTER, ROUTE_SPLASH, ROUTE_TASKS, MainWindow


@pytest.fixture()
def window(qtbot, fast_settings, task_manager) -> MainWindow:
    w = MainWindow(fast_settings, task_manager)
    qtbot.addWidget(w)
    w.show()
    return w


def _login(qtbot, window: MainWindow) -> None:
    window.navigate(ROUTE_LOGIN)
    window.login_screen.input_email.setText("jane.doe@example.com")
    window.login_screen.input_password.setText("secret")
    with qtbot.waitSignal(window.route_changed_signal, timeout=2000,
                          check_params_cb=lambda route: route == ROUTE_TASKS):
        window.login_screen.btn_submit.click()
    assert window.current_route == ROUTE_TASKS


def test_splash_transitions_to_login(qtbot, window) -> None:
    routes = []
    window.route_changed_signal.connect(routes.append)

    window.start()
    assert window.current_route == ROUTE_SPLASH

    with qtbot.waitSignal(window.route_changed_signal, timeout=2000) as blocker:
        pass
    assert blocker.args == [ROUTE_LOGIN]
    assert routes == [ROUTE_SPLASH, ROUTE_LOGIN]


def test_leaving_splash_early_cancels_its_timer(qtbot, window) -> None:
    window.start()
    window.navigate(ROUTE_REGISTER)

    assert not window.splash_screen.splash_timer.is_pending
    qtbot.wait(80)
    assert window.current_route == ROUTE_REGISTER


def test_closing_window_cancels_pending_splash(qtbot, window) -> None:
    window.start()
    window.close()

    assert not window.splash_screen.splash_timer.is_pending


def test_unknown_route_is_ignored(window) -> None:
    window.navigate(ROUTE_LOGIN)
    window.navigate("/nowhere")
    assert window.current_route == ROUTE_LOGIN


def test_blank_credentials_show_error(qtbot, window) -> None:
    window.navigate(ROUTE_LOGIN)
    window.login_screen.input_email.setText("a@b.c")

    window.login_screen.btn_submit.click()

    assert window.notifier.last_notification.kind == KIND_ERROR
    assert window.notifier.last_notification.description == "Please fill in all fields"
    assert not window.login_simulator.is_busy
    qtbot.wait(60)
    assert window.current_route == ROUTE_LOGIN


def test_google_login_disables_buttons_while_busy(qtbot, window) -> None:
    window.navigate(ROUTE_LOGIN)

    window.login_screen.btn_google.click()
    assert not window.login_screen.btn_google.isEnabled()
    assert not window.login_screen.btn_submit.isEnabled()

    qtbot.waitUntil(lambda: window.current_route == ROUTE_TASKS, timeout=2000)
    assert window.login_screen.btn_google.isEnabled()
    assert window.notifier.last_notification.description == "Successfully logged in with Google"
    assert window.task_screen.lbl_avatar.text() == "JD"


def test_cancel_and_signup_go_to_register(window) -> None:
    window.navigate(ROUTE_LOGIN)
    window.login_screen.btn_cancel.click()
    assert window.current_route == ROUTE_REGISTER

    window.register_screen.btn_back.click()
    assert window.current_route == ROUTE_LOGIN

    window.login_screen.btn_signup.click()
    assert window.current_route == ROUTE_REGISTER


def test_email_login_reaches_task_screen(qtbot, window) -> None:
    _login(qtbot, window)

    assert window.notifier.last_notification.title == "Welcome back!"
    assert window.task_screen.lbl_avatar.text() == "JD"
    assert window.task_screen.tabs.tabText(0) == "Open Tasks (0)"
    assert window.task_screen.tabs.tabText(1) == "Completed (0)"


def test_add_task_through_dialog(qtbot, window) -> None:
    _login(qtbot, window)
    screen = window.task_screen

    screen.btn_add.click()
    dialog = screen.task_dialog
    assert dialog is not None
    dialog.input_title.setText("Buy milk")
    dialog.input_priority.setCurrentIndex(dialog.input_priority.findData("low"))
    dialog.chk_has_due_date.setChecked(True)
    dialog.btn_save.click()

    assert screen.task_dialog is None
    tasks = window.task_manager.get_all_tasks()
    assert [t.title for t in tasks] == ["Buy milk"]
    assert tasks[0].priority is Priority.LOW
    assert tasks[0].due_date is not None
    assert screen.tabs.tabText(0) == "Open Tasks (1)"
    assert len(screen.cards[TaskStatus.OPEN]) == 1
    assert window.notifier.last_notification.description == "Task added successfully"


def test_blank_title_keeps_dialog_open(qtbot, window) -> None:
    _login(qtbot, window)
    screen = window.task_screen

    screen.btn_add.click()
    screen.task_dialog.input_title.setText("   ")
    screen.task_dialog.btn_save.click()

    assert screen.task_dialog is not None
    assert window.task_manager.get_all_tasks() == []
    assert window.notifier.last_notification.kind == KIND_ERROR
    assert window.notifier.last_notification.description == "Task title is required"


def test_edit_dialog_prefills_and_updates(qtbot, window) -> None:
    task = window.task_manager.add_task(TaskForm(title="Draft", description="v1", due_date="2024-06-01"))
    _login(qtbot, window)
    screen = window.task_screen

    screen.cards[TaskStatus.OPEN][0].btn_edit.click()
    dialog = screen.task_dialog
    assert dialog.input_title.text() == "Draft"
    assert dialog.input_description.toPlainText() == "v1"
    assert dialog.chk_has_due_date.isChecked()

    dialog.input_title.setText("Final")
    dialog.chk_has_due_date.setChecked(False)
    dialog.btn_save.click()

    assert task.title == "Final"
    assert task.due_date is None
    assert window.notifier.last_notification.description == "Task updated successfully"


def test_toggle_and_delete_from_cards(qtbot, window) -> None:
    window.task_manager.add_task(TaskForm(title="Walk dog"))
    _login(qtbot, window)
    screen = window.task_screen

    screen.cards[TaskStatus.OPEN][0].btn_toggle.click()

    assert screen.cards[TaskStatus.OPEN] == []
    assert len(screen.cards[TaskStatus.COMPLETED]) == 1
    completed_card = screen.cards[TaskStatus.COMPLETED][0]
    assert completed_card.btn_edit is None
    assert screen.tabs.tabText(1) == "Completed (1)"

    completed_card.btn_delete.click()

    assert window.task_manager.get_all_tasks() == []
    assert screen.cards[TaskStatus.COMPLETED] == []
    assert window.notifier.last_notification.kind == KIND_SUCCESS


def test_logout_returns_to_login_and_keeps_tasks(qtbot, window) -> None:
    window.task_manager.add_task(TaskForm(title="Survives logout"))
    _login(qtbot, window)

    window.task_screen.btn_logout.click()

    assert window.current_route == ROUTE_LOGIN
    assert len(window.task_manager.get_all_tasks()) == 1


def test_toast_shows_and_hides(qtbot, window) -> None:
    window.notifier.success("Success", "Task added successfully")

    assert window.toast.isVisible()
    assert window.toast.lbl_description.text() == "Task added successfully"
    qtbot.waitUntil(lambda: not window.toast.isVisible(), timeout=1000)


def test_closed_dialogs_are_released(qtbot, window) -> None:
    _login(qtbot, window)
    screen = window.task_screen

    for i in range(3):
        screen.btn_add.click()
        screen.task_dialog.input_title.setText(f"task {i}")
        screen.task_dialog.btn_save.click()
    screen.btn_add.click()
    screen.task_dialog.btn_cancel.click()

    assert len(window.task_manager.get_all_tasks()) == 3
    QCoreApplication.sendPostedEvents(None, QEvent.DeferredDelete)
    assert screen.findChildren(QDialog) == []


def _texts(widget) -> list:
    return [label.text() for label in widget.findChildren(QLabel)]


def test_empty_states_and_card_metadata(qtbot, window) -> None:
    _login(qtbot, window)
    screen = window.task_screen

    open_empty = screen.tab_layouts[TaskStatus.OPEN].itemAt(0).widget()
    done_empty = screen.tab_layouts[TaskStatus.COMPLETED].itemAt(0).widget()
    assert "No tasks yet" in _texts(open_empty)
    assert "Add your first task to get started!" in _texts(open_empty)
    assert "No completed tasks" in _texts(done_empty)
    assert "Complete some tasks to see them here" in _texts(done_empty)
    assert not [b for b in done_empty.findChildren(QPushButton) if "Add Your First Task" in b.text()]

    first_task_button = next(b for b in open_empty.findChildren(QPushButton) if "Add Your First Task" in b.text())
    first_task_button.click()
    assert screen.task_dialog is not None
    screen.task_dialog.btn_cancel.click()

    due = window.task_manager.add_task(TaskForm(title="Pay rent", due_date="2024-06-01"))
    done = window.task_manager.add_task(TaskForm(title="Buy milk"))
    window.task_manager.toggle_task_status(done.id)

    open_card = screen.cards[TaskStatus.OPEN][0]
    assert open_card.task_id == due.id
    assert any(t.endswith("Due: June 01, 2024") for t in _texts(open_card))

    done_card = screen.cards[TaskStatus.COMPLETED][0]
    expected = f"Completed: {done.updated_at.strftime('%B %d, %Y')}"
    assert any(t.endswith(expected) for t in _texts(done_card))
    assert not any("Due:" in t for t in _texts(done_card))
