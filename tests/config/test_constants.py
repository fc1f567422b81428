from zombie_outbreak.config.constants import (
    CARDINAL_DIRECTIONS,
    CHANGE_DIRECTION_PROBABILITY,
    DETECTION_RANGE,
    DIAGONAL_DIRECTIONS,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    HOUSE_HEIGHT,
    HOUSE_WIDTH,
    NUM_HUMANS,
    NUM_TICKS,
    NUM_WEAPONS,
    NUM_ZOMBIES,
    WEAPON_COOLDOWN,
)


def test_grid_dimensions_are_positive_ints() -> None:
    assert isinstance(GRID_WIDTH, int) and GRID_WIDTH > 0
    assert isinstance(GRID_HEIGHT, int) and GRID_HEIGHT > 0


def test_population_fits_in_grid() -> None:
    assert NUM_ZOMBIES + NUM_HUMANS < GRID_WIDTH * GRID_HEIGHT
    assert NUM_WEAPONS >= 0


def test_houses_fit_in_grid() -> None:
    assert 3 <= HOUSE_WIDTH <= GRID_WIDTH
    assert 3 <= HOUSE_HEIGHT <= GRID_HEIGHT


def test_weapon_cooldown_is_five_ticks() -> None:
    assert WEAPON_COOLDOWN == 5


def test_detection_range_is_ten() -> None:
    assert DETECTION_RANGE == 10


def test_change_direction_probability_is_a_probability() -> None:
    assert 0.0 <= CHANGE_DIRECTION_PROBABILITY <= 1.0


def test_num_ticks_is_positive() -> None:
    assert isinstance(NUM_TICKS, int) and NUM_TICKS > 0


def test_directions_are_unit_steps() -> None:
    assert len(set(CARDINAL_DIRECTIONS)) == 4
    assert all(abs(dx) + abs(dy) == 1 for dx, dy in CARDINAL_DIRECTIONS)
    assert all(abs(dx) == abs(dy) == 1 for dx, dy in DIAGONAL_DIRECTIONS)


def test_flush_threshold_is_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024
