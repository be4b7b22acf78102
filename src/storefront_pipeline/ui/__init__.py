"""Shared UI state and the views bound to it."""

from storefront_pipeline.ui.debug_panel import Control, DebugPanel, PanelView
from storefront_pipeline.ui.state import (
    UIContextValue,
    UIProvider,
    UIState,
    current_provider,
    use_ui,
)

__all__ = [
    "Control",
    "DebugPanel",
    "PanelView",
    "UIContextValue",
    "UIProvider",
    "UIState",
    "current_provider",
    "use_ui",
]
