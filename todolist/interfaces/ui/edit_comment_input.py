# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Headless inline editor for a comment draft.

The draft itself belongs to the owner: the component forwards every edit
through ``on_change`` and only shows what the owner pushes back with
``set_value``. Keyboard contract:

* Control+Enter / Command+Enter: confirm, no newline is inserted
* Escape: cancel
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .timers import ScopedTimer, TimerFactory, thread_timer

SETTLE_DELAY_SECONDS = 0.1


class TextArea(Protocol):
    value: str
    height: str

    @property
    def scroll_height(self) -> int: ...

    def focus(self) -> None: ...


@dataclass(slots=True)
class KeyEvent:
    key: str
    ctrl_key: bool = False
    meta_key: bool = False
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class EditCommentInput:
    def __init__(
        self,
        *,
        value: str,
        on_change: Callable[[str], None],
        on_confirm: Callable[[], None],
        on_cancel: Callable[[], None],
        textarea: TextArea,
        settle_delay: float = SETTLE_DELAY_SECONDS,
        timer_factory: TimerFactory = thread_timer,
    ) -> None:
        self._value = value
        self._on_change = on_change
        self._on_confirm = on_confirm
        self._on_cancel = on_cancel
        self._textarea = textarea
        self._settle_delay = settle_delay
        self._timer_factory = timer_factory
        self._settle_timer: ScopedTimer | None = None
        self._textarea.value = value

    @property
    def value(self) -> str:
        return self._value

    @property
    def mounted(self) -> bool:
        return self._settle_timer is not None

    def mount(self) -> None:
        if self._settle_timer is not None:
            return
        self.resize()
        self._settle_timer = ScopedTimer(
            self._settle_delay, self._settle, factory=self._timer_factory
        )
        self._settle_timer.start()

    def unmount(self) -> None:
        if self._settle_timer is not None:
            self._settle_timer.cancel()
            self._settle_timer = None

    def _settle(self) -> None:
        self._textarea.focus()
        self.resize()

    def resize(self) -> None:
        # collapse first so scroll_height reflects the content, not the old box
        self._textarea.height = "auto"
        self._textarea.height = f"{self._textarea.scroll_height}px"

    def set_value(self, value: str) -> None:
        if value == self._value:
            return
        self._value = value
        self._textarea.value = value
        self.resize()

    def handle_input(self, text: str) -> None:
        self._on_change(text)

    def handle_key_down(self, event: KeyEvent) -> None:
        if (event.meta_key or event.ctrl_key) and event.key == "Enter":
            event.prevent_default()
            self._on_confirm()
        elif event.key == "Escape":
            self._on_cancel()

    def click_confirm(self) -> None:
        self._on_confirm()

    def click_cancel(self) -> None:
        self._on_cancel()

    def render(self) -> dict[str, Any]:
        return {
            "textarea": {"value": self._value, "height": self._textarea.height},
            "buttons": [
                {"type": "button", "aria_label": "Confirm", "icon": "check"},
                {"type": "button", "aria_label": "Cancel", "icon": "x"},
            ],
        }


__all__ = ["EditCommentInput", "KeyEvent", "SETTLE_DELAY_SECONDS", "TextArea"]
