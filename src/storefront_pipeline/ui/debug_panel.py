"""DebugPanel — mini-cart debug overlay bound to the shared UIState."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from storefront_pipeline._types import Unsubscribe
from storefront_pipeline.ui.state import UIProvider, UIState, current_provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Control:
    """A clickable button of a rendered view."""

    label: str
    on_click: Callable[[], None]

    def click(self) -> None:
        self.on_click()


@dataclass(frozen=True)
class PanelView:
    """One render of the debug panel."""

    title: str
    status: str
    controls: tuple[Control, ...]

    def control(self, label: str) -> Control:
        for control in self.controls:
            if control.label == label:
                return control
        raise KeyError(label)

    def to_text(self) -> str:
        buttons = " ".join(f"[{c.label}]" for c in self.controls)
        return "\n".join((self.title, self.status, buttons))


class DebugPanel:
    """Shows whether the mini-cart is open, with OPEN and CLOSE controls.

    Reads the state on every render. Once mounted, it re-renders
    synchronously on each state change and keeps the result in
    ``last_view``.
    """

    TITLE = "Debug Controls"

    def __init__(self, provider: UIProvider | None = None) -> None:
        self._provider = provider if provider is not None else current_provider()
        self._unsubscribe: Unsubscribe | None = None
        self.last_view: PanelView | None = None

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def render(self) -> PanelView:
        mini_cart_open, set_mini_cart_open = self._provider.value()
        view = PanelView(
            title=self.TITLE,
            status=f"Cart is: {'OPEN' if mini_cart_open else 'CLOSED'}",
            controls=(
                Control("OPEN", lambda: set_mini_cart_open(True)),
                Control("CLOSE", lambda: set_mini_cart_open(False)),
            ),
        )
        self.last_view = view
        return view

    def mount(self) -> PanelView:
        if self._unsubscribe is None:
            self._unsubscribe = self._provider.state.subscribe(self._on_change)
            logger.debug("Debug panel mounted")
        return self.render()

    def unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_change(self, _state: UIState) -> None:
        self.render()
