"""Интерфейс поверхности отображения виджета.

Оркестратор и презентер работают только через этот протокол,
поэтому их можно тестировать без страницы.
"""

from typing import List, Optional, Protocol


class RenderingSurface(Protocol):
    """Protocol for the surface the widget reads from and renders onto."""

    def read_input(self) -> Optional[str]:
        """Return the raw region input, or None when there is no input control."""
        ...

    def clear_input(self) -> None:
        """Empty the input control."""
        ...

    def clear_display(self) -> None:
        """Remove previously rendered alerts content."""
        ...

    def show_summary(self, text: str) -> None:
        """Append the one-line summary to the alerts display."""
        ...

    def show_headlines(self, headlines: List[str]) -> None:
        """Append the list of headlines to the alerts display."""
        ...

    def show_error(self, message: str) -> None:
        """Write the message into the error area and make it visible."""
        ...

    def clear_error(self) -> None:
        """Empty and hide the error area."""
        ...

    def set_busy(self, busy: bool) -> None:
        """Disable the trigger with a loading label, or restore it."""
        ...
