"""Interactive terminal front-end built on rich."""

from .controller import Controller
from .view import RichView, View

__all__ = ["Controller", "RichView", "View", "run_terminal"]


def run_terminal(app) -> None:
    """Run the menu loop against an application's inventory."""
    controller = Controller(
        RichView(),
        app.inventory,
        trade_threshold=app.config.trade.confirmation_threshold,
    )
    controller.run()
