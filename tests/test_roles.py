import random
from collections import Counter
from itertools import permutations

import pytest

from imposter.engine.roles import (
    IMPOSTER,
    MAX_PLAYERS,
    MIN_PLAYERS,
    assign_roles,
    build_roles,
    clamp_player_count,
    get_role,
    shuffle_roles,
)


@pytest.mark.parametrize("player_count", range(MIN_PLAYERS, MAX_PLAYERS + 1))
def test_build_roles_has_single_imposter(player_count):
    roles = build_roles("Cat", player_count)

    assert len(roles) == player_count
    assert roles.count(IMPOSTER) == 1
    assert roles.count("Cat") == player_count - 1


@pytest.mark.parametrize("player_count", [0, 2, 13])
def test_build_roles_rejects_out_of_range(player_count):
    with pytest.raises(ValueError):
        build_roles("Cat", player_count)


def test_shuffle_roles_is_in_place_and_keeps_contents():
    roles = ["a", "b", "c", "d", "e"]
    result = shuffle_roles(roles, random.Random(7))

    assert result is roles
    assert sorted(result) == ["a", "b", "c", "d", "e"]


def test_shuffle_roles_is_repeatable_with_seed():
    first = shuffle_roles(list(range(10)), random.Random(99))
    second = shuffle_roles(list(range(10)), random.Random(99))
    assert first == second


def test_shuffle_roles_walks_down_from_last_index():
    class RecordingRandom(random.Random):
        def __init__(self):
            super().__init__(0)
            self.calls = []

        def randint(self, a, b):
            self.calls.append((a, b))
            return a

    rng = RecordingRandom()
    roles = shuffle_roles(["w", "x", "y", "z"], rng)

    assert rng.calls == [(0, 3), (0, 2), (0, 1)]
    # Always picking 0: swap(3,0), swap(2,0), swap(1,0)
    assert roles == ["x", "y", "z", "w"]


def test_shuffle_roles_covers_every_ordering_evenly():
    rng = random.Random(2024)
    trials = 6000
    counts = Counter(tuple(shuffle_roles([0, 1, 2], rng)) for _ in range(trials))

    assert set(counts) == set(permutations([0, 1, 2]))
    expected = trials / 6
    chi_square = sum((observed - expected) ** 2 / expected for observed in counts.values())
    # 5 degrees of freedom, p = 0.0001
    assert chi_square < 25.75


def test_shuffle_roles_handles_tiny_lists():
    rng = random.Random(1)
    assert shuffle_roles([], rng) == []
    assert shuffle_roles(["only"], rng) == ["only"]


def test_assign_roles_reports_imposter_seat():
    roles, imposter_index = assign_roles("Cat", 6, random.Random(5))

    assert roles[imposter_index] == IMPOSTER
    assert roles.count(IMPOSTER) == 1


def test_assign_roles_tracks_seat_when_word_matches_sentinel():
    roles, imposter_index = assign_roles(IMPOSTER, 5, random.Random(5))

    assert roles == [IMPOSTER] * 5
    assert 0 <= imposter_index < 5


@pytest.mark.parametrize(
    "requested, expected",
    [(-1, 3), (2, 3), (3, 3), (7, 7), (12, 12), (13, 12), (100, 12)],
)
def test_clamp_player_count(requested, expected):
    assert clamp_player_count(requested) == expected


def test_get_role():
    assert get_role("Imposter").team == "imposter"
    assert get_role("Civilian").team == "civilian"
    with pytest.raises(ValueError):
        get_role("Werewolf")
