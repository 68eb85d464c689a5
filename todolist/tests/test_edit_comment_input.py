from __future__ import annotations

from collections.abc import Callable

import pytest

from todolist.interfaces.ui.edit_comment_input import (
    SETTLE_DELAY_SECONDS,
    EditCommentInput,
    KeyEvent,
)
from todolist.interfaces.ui.timers import ScopedTimer


class FakeTextArea:
    line_height = 20

    def __init__(self) -> None:
        self.value = ""
        self.height = ""
        self.focus_calls = 0
        self.heights: list[str] = []

    @property
    def scroll_height(self) -> int:
        return self.line_height * (self.value.count("\n") + 1)

    def focus(self) -> None:
        self.focus_calls += 1

    def __setattr__(self, name: str, value: object) -> None:
        if name == "height" and "heights" in self.__dict__:
            self.heights.append(value)  # type: ignore[arg-type]
        super().__setattr__(name, value)


class ManualTimer:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        # simulates a callback that was already due when cancel() ran
        self.callback()


class Recorder:
    def __init__(self) -> None:
        self.changes: list[str] = []
        self.confirms = 0
        self.cancels = 0

    def on_change(self, text: str) -> None:
        self.changes.append(text)

    def on_confirm(self) -> None:
        self.confirms += 1

    def on_cancel(self) -> None:
        self.cancels += 1


@pytest.fixture()
def timers() -> list[ManualTimer]:
    return []


@pytest.fixture()
def textarea() -> FakeTextArea:
    return FakeTextArea()


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def widget(timers: list[ManualTimer], textarea: FakeTextArea, recorder: Recorder) -> EditCommentInput:
    def factory(delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay, callback)
        timers.append(timer)
        return timer

    return EditCommentInput(
        value="one\ntwo",
        on_change=recorder.on_change,
        on_confirm=recorder.on_confirm,
        on_cancel=recorder.on_cancel,
        textarea=textarea,
        timer_factory=factory,
    )


def test_mount_sizes_then_focuses_after_settle(
    widget: EditCommentInput, textarea: FakeTextArea, timers: list[ManualTimer]
) -> None:
    widget.mount()

    assert textarea.value == "one\ntwo"
    assert textarea.height == "40px"
    assert textarea.focus_calls == 0
    assert len(timers) == 1
    assert timers[0].started and timers[0].delay == SETTLE_DELAY_SECONDS

    timers[0].fire()

    assert textarea.focus_calls == 1
    assert textarea.height == "40px"


def test_mount_twice_schedules_one_timer(widget: EditCommentInput, timers: list[ManualTimer]) -> None:
    widget.mount()
    widget.mount()

    assert len(timers) == 1
    assert widget.mounted


def test_unmount_cancels_pending_focus(
    widget: EditCommentInput, textarea: FakeTextArea, timers: list[ManualTimer]
) -> None:
    widget.mount()
    widget.unmount()

    assert timers[0].cancelled
    timers[0].fire()
    assert textarea.focus_calls == 0
    assert not widget.mounted


def test_resize_collapses_before_measuring(widget: EditCommentInput, textarea: FakeTextArea) -> None:
    textarea.heights.clear()

    widget.set_value("a\nb\nc")

    assert textarea.heights == ["auto", "60px"]


def test_resize_shrinks_with_content(widget: EditCommentInput, textarea: FakeTextArea) -> None:
    widget.mount()
    widget.set_value("only one line")

    assert textarea.value == "only one line"
    assert textarea.height == "20px"


def test_set_value_ignores_same_value(widget: EditCommentInput, textarea: FakeTextArea) -> None:
    textarea.heights.clear()

    widget.set_value("one\ntwo")

    assert textarea.heights == []


def test_typing_is_reported_not_applied(
    widget: EditCommentInput, textarea: FakeTextArea, recorder: Recorder
) -> None:
    widget.handle_input("one\ntwo!")

    assert recorder.changes == ["one\ntwo!"]
    assert widget.value == "one\ntwo"


@pytest.mark.parametrize("modifier", ["ctrl_key", "meta_key"])
def test_modifier_enter_confirms_without_newline(
    widget: EditCommentInput, recorder: Recorder, modifier: str
) -> None:
    event = KeyEvent(key="Enter", **{modifier: True})

    widget.handle_key_down(event)

    assert event.default_prevented
    assert recorder.confirms == 1
    assert recorder.cancels == 0


def test_plain_enter_is_left_alone(widget: EditCommentInput, recorder: Recorder) -> None:
    event = KeyEvent(key="Enter")

    widget.handle_key_down(event)

    assert not event.default_prevented
    assert recorder.confirms == 0


def test_escape_cancels(widget: EditCommentInput, recorder: Recorder) -> None:
    widget.handle_key_down(KeyEvent(key="Escape"))

    assert recorder.cancels == 1
    assert recorder.confirms == 0


def test_buttons_and_render(widget: EditCommentInput, recorder: Recorder) -> None:
    widget.click_confirm()
    widget.click_cancel()

    assert (recorder.confirms, recorder.cancels) == (1, 1)
    rendered = widget.render()
    assert rendered["textarea"]["value"] == "one\ntwo"
    assert [b["aria_label"] for b in rendered["buttons"]] == ["Confirm", "Cancel"]
    assert all(b["type"] == "button" for b in rendered["buttons"])


def test_scoped_timer_rejects_second_start() -> None:
    timer = ScopedTimer(0.01, lambda: None, factory=ManualTimer)
    timer.start()

    assert timer.pending
    with pytest.raises(RuntimeError):
        timer.start()
    timer.cancel()
    timer.cancel()
    assert not timer.pending


def test_scoped_timer_runs_real_thread_once() -> None:
    import threading

    fired = threading.Event()
    timer = ScopedTimer(0.01, fired.set)
    timer.start()

    assert fired.wait(2.0)
    assert not timer.pending
