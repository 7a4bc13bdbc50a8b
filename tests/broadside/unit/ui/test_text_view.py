import pytest

from broadside.game.core.models import Coord
from broadside.game.ui.text_view import parse_coordinate, render_ui_state


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("A1", Coord(0, 0)),
        ("b7", Coord(1, 6)),
        ("J10", Coord(9, 9)),
        (" c 3 ", Coord(2, 2)),
        ("2 7", Coord(1, 6)),
        ("10,10", Coord(9, 9)),
        ("1 1", Coord(0, 0)),
    ],
)
def test_parse_coordinate_accepts_both_notations(text: str, expected: Coord) -> None:
    assert parse_coordinate(text) == expected


@pytest.mark.parametrize("text", ["", "K1", "A11", "A0", "0 5", "5 0", "11 1", "fire"])
def test_parse_coordinate_rejects_garbage_and_out_of_range(text: str) -> None:
    assert parse_coordinate(text) is None


def test_letter_and_number_forms_name_the_same_cell() -> None:
    assert parse_coordinate("B7") == parse_coordinate("2 7")
    assert parse_coordinate("J1") == parse_coordinate("10 1") == Coord(9, 0)


def test_render_placement_lists_remaining_ships(controller_factory) -> None:
    controller = controller_factory()
    controller.select_ship(1)
    text = render_ui_state(controller.ui_state())
    assert "Player 1 (you)" in text
    assert " > [1] Battleship (4)" in text
    assert "   [0] Carrier (5)" in text
    assert "orientation: horizontal" in text


def test_render_combat_hides_enemy_ships(controller_factory, place_standard_fleet) -> None:
    controller = controller_factory()
    place_standard_fleet(controller)
    controller.attack_at(0, 9)
    lines = render_ui_state(controller.ui_state()).splitlines()
    board_rows = lines[2:12]
    enemy_columns = [line.split("    ", 1)[1] for line in board_rows]
    assert all("S" not in row for row in enemy_columns)
    assert any("S" in line.split("    ", 1)[0] for line in board_rows)
    assert "Player 1 to fire." in lines
