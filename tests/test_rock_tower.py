import pytest

from aocpuzzles.cycle import CycleGuesser, LinkedList
from aocpuzzles.rock_tower import (
    can_move,
    find_cycle,
    is_same_sequence,
    main,
    tower_height,
    tower_height_with_cycles,
)
from aocpuzzles.shapes import make_shape

EXAMPLE_JETS = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"
NAMES = ("A", "B", "C", "D", "E")


def _history(count, x_of=lambda i: i % 5):
    history = LinkedList()
    for i in range(count):
        history.append(
            CycleGuesser(
                tetrimino=make_shape(1, (0, i)),
                tetrimino_name=NAMES[i % 5],
                x_position=x_of(i),
                index_jet=i % 10,
                total_jet=10 * i,
                height=3 * i,
                ptr_tetriminos_index=(i + 1) % 5 + 1,
            )
        )
    return history


def test_can_move_in_empty_chamber():
    assert can_move(make_shape(1, (2, 4)), set()) is True


def test_can_move_rejects_wall():
    assert can_move(make_shape(1, (4, 4)), set()) is False


def test_can_move_rejects_floor():
    assert can_move(make_shape(5, (0, 0)), set()) is False


def test_can_move_rejects_overlap():
    assert can_move(make_shape(1, (2, 4)), {(3, 4)}) is False


def test_tower_height_example():
    assert tower_height(EXAMPLE_JETS, 2022) == 3068


def test_tower_height_after_ten_rocks():
    assert tower_height(EXAMPLE_JETS, 10) == 17


@pytest.mark.parametrize("count", range(1, 11))
def test_cycles_match_plain_simulation_for_few_rocks(count):
    assert tower_height_with_cycles(EXAMPLE_JETS, count) == tower_height(EXAMPLE_JETS, count)


def test_tower_height_grows_with_rocks():
    heights = [tower_height(EXAMPLE_JETS, n) for n in range(1, 30)]
    assert heights == sorted(heights)
    assert all(later - earlier <= 4 for earlier, later in zip(heights, heights[1:]))


def test_tower_height_with_cycles_large_count_is_bounded():
    count = 10**12
    height = tower_height_with_cycles(EXAMPLE_JETS, count)
    assert count // 2 < height <= 4 * count


@pytest.mark.parametrize("function", [tower_height, tower_height_with_cycles])
def test_empty_jets_rejected(function):
    with pytest.raises(ValueError):
        function("", 5)


@pytest.mark.parametrize("function", [tower_height, tower_height_with_cycles])
def test_no_rock_rejected(function):
    with pytest.raises(ValueError):
        function(EXAMPLE_JETS, 0)


def test_unknown_jet_rejected():
    with pytest.raises(ValueError):
        tower_height("x", 1)


def test_find_cycle_on_periodic_history():
    history = _history(21)
    assert find_cycle(history, 10) == (5, history[20].height - history[15].height)


def test_find_cycle_short_history():
    assert find_cycle(_history(3), 10) is None


def test_find_cycle_empty_history():
    assert find_cycle(LinkedList(), 10) is None


def test_find_cycle_without_repetition():
    assert find_cycle(_history(21, x_of=lambda i: i), 10) is None


def test_find_cycle_needs_enough_jets():
    assert find_cycle(_history(21), 1000) is None


def test_is_same_sequence_periodic():
    history = _history(21)
    assert is_same_sequence(history.node(10), history.node(15)) is True


def test_is_same_sequence_detects_difference():
    history = _history(21, x_of=lambda i: 99 if i == 12 else i % 5)
    assert is_same_sequence(history.node(10), history.node(15)) is False


def test_main_prints_heights(tmp_path, capsys):
    (tmp_path / "17_12.txt").write_text(EXAMPLE_JETS + "\n", encoding="utf-8")
    assert main(["--directory", str(tmp_path), "--rocks", "10"]) == 0
    output = capsys.readouterr().out
    assert "after 2022 rocks : 3068" in output
    assert "after 10 rocks : 17" in output