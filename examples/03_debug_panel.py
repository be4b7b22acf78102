"""
Mini-cart debug panel example.

Demonstrates:
- One UIProvider owning the session's UIState
- Views reading state through use_ui()
- The DebugPanel re-rendering on every state change
"""

from storefront_pipeline import DebugPanel, UIProvider, use_ui


def header_badge() -> str:
    """A second consumer of the same shared state."""
    return "cart: open" if use_ui().mini_cart_open else "cart: closed"


def main() -> None:
    provider = UIProvider()
    with provider.provide():
        panel = DebugPanel()
        print(panel.mount().to_text())

        panel.last_view.control("OPEN").click()
        print(panel.last_view.to_text())
        print(header_badge())

        panel.last_view.control("CLOSE").click()
        print(panel.last_view.to_text())
        print(header_badge())

        panel.unmount()


if __name__ == "__main__":
    main()
