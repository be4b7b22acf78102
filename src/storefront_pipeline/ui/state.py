"""UIState — session-wide UI flags with a provider and ``use_ui`` accessor."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import NamedTuple

from storefront_pipeline._types import StateListener, Unsubscribe


def _require_bool(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
    return value


class UIState:
    """Boolean UI flags for one session.

    Flags change only through their setters. A setter called with the current
    value does nothing; an actual change notifies every subscriber
    synchronously, in subscription order. Opening the mini-cart closes search
    and opening search closes the mini-cart.
    """

    def __init__(
        self,
        *,
        mini_cart_open: bool = False,
        search_open: bool = False,
        mobile_menu_open: bool = False,
    ) -> None:
        self._mini_cart_open = _require_bool("mini_cart_open", mini_cart_open)
        self._search_open = _require_bool("search_open", search_open)
        self._mobile_menu_open = _require_bool("mobile_menu_open", mobile_menu_open)
        self._listeners: list[StateListener] = []

    @property
    def mini_cart_open(self) -> bool:
        return self._mini_cart_open

    @property
    def search_open(self) -> bool:
        return self._search_open

    @property
    def mobile_menu_open(self) -> bool:
        return self._mobile_menu_open

    @property
    def scroll_locked(self) -> bool:
        """True while any overlay covering the page is open."""
        return self._mini_cart_open or self._search_open or self._mobile_menu_open

    def set_mini_cart_open(self, next_value: bool) -> None:
        next_value = _require_bool("mini_cart_open", next_value)
        if next_value == self._mini_cart_open:
            return
        self._mini_cart_open = next_value
        self._notify()

    def set_search_open(self, next_value: bool) -> None:
        next_value = _require_bool("search_open", next_value)
        if next_value == self._search_open:
            return
        self._search_open = next_value
        self._notify()

    def set_mobile_menu_open(self, next_value: bool) -> None:
        next_value = _require_bool("mobile_menu_open", next_value)
        if next_value == self._mobile_menu_open:
            return
        self._mobile_menu_open = next_value
        self._notify()

    def open_cart(self) -> None:
        self.set_mini_cart_open(True)
        self.set_search_open(False)

    def close_cart(self) -> None:
        self.set_mini_cart_open(False)

    def open_search(self) -> None:
        self.set_search_open(True)
        self.set_mini_cart_open(False)

    def close_search(self) -> None:
        self.set_search_open(False)

    def toggle_mobile_menu(self) -> None:
        self.set_mobile_menu_open(not self._mobile_menu_open)

    def subscribe(self, listener: StateListener) -> Unsubscribe:
        """Register a re-render callback and return its unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


class UIContextValue(NamedTuple):
    """What ``use_ui()`` hands to a view."""

    mini_cart_open: bool
    set_mini_cart_open: Callable[[bool], None]


_current_provider: ContextVar[UIProvider | None] = ContextVar(
    "storefront_ui_provider", default=None
)


class UIProvider:
    """Owns the single UIState of a session and scopes it for ``use_ui``."""

    def __init__(self, state: UIState | None = None) -> None:
        self.state = state if state is not None else UIState()

    def value(self) -> UIContextValue:
        return UIContextValue(
            mini_cart_open=self.state.mini_cart_open,
            set_mini_cart_open=self.state.set_mini_cart_open,
        )

    @contextmanager
    def provide(self) -> Iterator[UIState]:
        token = _current_provider.set(self)
        try:
            yield self.state
        finally:
            _current_provider.reset(token)


def current_provider() -> UIProvider:
    """Return the provider in scope, raising LookupError outside one."""
    provider = _current_provider.get()
    if provider is None:
        raise LookupError("No UIProvider is in scope")
    return provider


def use_ui() -> UIContextValue:
    """Read the current cart visibility and its setter."""
    return current_provider().value()
