"""Mintpad - mint phase scheduling and launch workflow.

Decides which mint phase of an inscription collection is live, who may
mint in it, and when a collection may move between launch states.
"""

__version__ = "0.1.0"

from mintpad.infrastructure.api.app import app

__all__ = ["app", "__version__"]
