"""Services layer - Application orchestration.

Available services:
- WayfindingService: Answers shortest-route queries over the loaded graph
"""

from .wayfinding import WayfindingService

__all__ = ["WayfindingService"]
