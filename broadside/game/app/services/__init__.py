"""Application service-layer helpers."""

from broadside.game.app.services.battle import TurnResult, resolve_autonomous_attack, resolve_human_attack
from broadside.game.app.services.placement import PlacementFlowService, PlacementRejection, PlacementResult
from broadside.game.app.services.state_projection import build_ui_state, default_viewer_index, placement_options

__all__ = [
    "PlacementFlowService",
    "PlacementRejection",
    "PlacementResult",
    "TurnResult",
    "build_ui_state",
    "default_viewer_index",
    "placement_options",
    "resolve_autonomous_attack",
    "resolve_human_attack",
]
