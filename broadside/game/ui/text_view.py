"""Plain-text rendering of match state for terminal play."""

from __future__ import annotations

import re

from broadside.game.app.state_machine import MatchPhase
from broadside.game.app.ui_state import MatchUIState
from broadside.game.core.board import BoardSnapshot, CellView
from broadside.game.core.models import BOARD_SIZE, Coord

ROW_LABELS = "ABCDEFGHIJ"

_COORD_RE = re.compile(r"^\s*([A-Ja-j])\s*(10|[1-9])\s*$")
_NUMERIC_RE = re.compile(r"^\s*(\d+)[\s,]+(\d+)\s*$")


def parse_coordinate(text: str, size: int = BOARD_SIZE) -> Coord | None:
    """Parse 'B7' (row letter, column number) or '2 7' (row number, column number).

    Both forms count from 1, matching the rendered board labels.
    """
    match = _COORD_RE.match(text)
    if match:
        coord = Coord(ROW_LABELS.index(match.group(1).upper()), int(match.group(2)) - 1)
    else:
        numeric = _NUMERIC_RE.match(text)
        if numeric is None:
            return None
        coord = Coord(int(numeric.group(1)) - 1, int(numeric.group(2)) - 1)
    if not (0 <= coord.row < size and 0 <= coord.col < size):
        return None
    return coord


def cell_symbol(cell: CellView) -> str:
    if cell.hit:
        return "X"
    if cell.missed:
        return "o"
    if cell.ship_visible:
        return "S"
    return "."


def render_board(snapshot: BoardSnapshot, title: str) -> list[str]:
    """Render one board as fixed-width lines."""
    header = "   " + " ".join(f"{col + 1:>2}" for col in range(snapshot.size))
    lines = [title.center(len(header)), header]
    for row_index, row in enumerate(snapshot.cells):
        symbols = " ".join(f"{cell_symbol(cell):>2}" for cell in row)
        lines.append(f"{ROW_LABELS[row_index]:<2} {symbols}")
    return lines


def render_ui_state(ui: MatchUIState) -> str:
    """Render both boards side by side plus status and placement hints."""
    own = render_board(ui.own_board, f"{ui.viewer_name} (you)")
    enemy_title = "Enemy fleet" if not ui.reveal_enemy_fleet else "Enemy fleet (revealed)"
    enemy = render_board(ui.enemy_board, enemy_title)
    width = max(len(line) for line in own)
    lines = [f"{left:<{width}}    {right}" for left, right in zip(own, enemy)]
    lines.append("")
    lines.append(ui.status)
    if ui.phase is MatchPhase.PLACEMENT and ui.placement is not None:
        lines.append(f"{ui.active_player_name}, orientation: {ui.placement.orientation.value.lower()}")
        for index, spec in enumerate(ui.placement.remaining):
            marker = ">" if index == ui.placement.selected_index else " "
            lines.append(f" {marker} [{index}] {spec.name} ({spec.length})")
    elif ui.phase is MatchPhase.COMBAT:
        if ui.awaiting_autonomous_move:
            lines.append("Enemy is aiming...")
        else:
            lines.append(f"{ui.active_player_name} to fire.")
    elif ui.winner_name is not None:
        lines.append(f"Game over: {ui.winner_name} wins. Type 'restart' to play again.")
    return "\n".join(lines)
