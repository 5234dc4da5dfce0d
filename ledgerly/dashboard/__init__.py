"""Mini README: Dashboard session state and display helpers.

Exports the controller that owns a session's ledger and goal. Formatting
helpers live in ``presentation`` and are imported by the web interface.
"""

from .controller import DEMO_TRANSACTIONS, DashboardController

__all__ = ["DEMO_TRANSACTIONS", "DashboardController"]
