"""Tests for drinking_game.engine: selection, escalation, materialization."""

import random

import pytest

from drinking_game.catalog import CATALOG
from drinking_game.engine import (
    DEFAULT_HOST,
    calculate_effective_drink,
    escalate,
    extract_host_name,
    generate_rules_for_video,
    get_drink_name,
    materialize_rules,
    select_rules,
)
from drinking_game.models import Category, DrinkLevel, RuleTemplate


def _t(text: str, category: Category, weight: float = 1.0, base: DrinkLevel = DrinkLevel.SIP) -> RuleTemplate:
    return RuleTemplate(text=text, category=category, weight=weight, base_drink=base)


class StubRandom:
    """Keeps category order, returns a fixed random(), and picks the last index in randrange()."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value
        self.randrange_calls: list[int] = []

    def shuffle(self, items: list) -> None:
        pass

    def random(self) -> float:
        return self.value

    def randrange(self, n: int) -> int:
        self.randrange_calls.append(n)
        return n - 1


class NoShuffleRandom(random.Random):
    def shuffle(self, items: list) -> None:  # type: ignore[override]
        pass


# ---------------------------------------------------------------------------
# select_rules
# ---------------------------------------------------------------------------

class TestSelectRulesLength:
    @pytest.mark.parametrize("max_rules", range(0, 10))
    def test_exact_length_when_pool_is_large_enough(self, max_rules: int) -> None:
        for seed in range(100):
            rules = select_rules(2, max_rules, rng=random.Random(seed))
            assert len(rules) == max_rules

    def test_default_game_always_has_five_rules(self) -> None:
        for seed in range(500):
            assert len(select_rules(intoxication_level=3, rng=random.Random(seed))) == 5

    def test_short_result_when_pool_runs_out(self) -> None:
        # 50 // 2 clamps to 3 categories of 3 templates each
        for seed in range(50):
            rules = select_rules(1, 50, rng=random.Random(seed))
            assert len(rules) == 9
            assert len({r.category for r in rules}) == 3

    def test_zero_and_negative_max_rules(self) -> None:
        assert select_rules(1, 0, rng=random.Random(0)) == []
        assert select_rules(1, -3, rng=random.Random(0)) == []

    def test_empty_catalog(self) -> None:
        assert select_rules(1, 5, rng=random.Random(0), catalog=()) == []

    def test_no_matching_templates(self) -> None:
        catalog = [_t("only {host}", Category.GENERAL)]
        # StubRandom keeps enum order, so camera and film are chosen
        assert select_rules(1, 5, rng=StubRandom(), catalog=catalog) == []


class TestSelectRulesContent:
    def test_no_duplicates(self) -> None:
        for seed in range(200):
            rules = select_rules(2, 7, rng=random.Random(seed))
            assert len({r.text for r in rules}) == len(rules)

    def test_at_least_two_categories_for_four_or_more(self) -> None:
        for max_rules in (4, 5, 6, 8):
            for seed in range(200):
                rules = select_rules(2, max_rules, rng=random.Random(seed))
                assert len({r.category for r in rules}) >= 2

    def test_two_categories_for_small_requests(self) -> None:
        rules = select_rules(1, 5, rng=StubRandom())
        assert {r.category for r in rules} <= {Category.CAMERA, Category.FILM}

    def test_three_categories_for_six_or_more(self) -> None:
        rules = select_rules(1, 9, rng=StubRandom())
        assert {r.category for r in rules} == {Category.CAMERA, Category.FILM, Category.TECHNIQUE}

    def test_results_come_from_catalog(self) -> None:
        rules = select_rules(1, 5, rng=random.Random(3))
        assert all(r in CATALOG for r in rules)

    def test_same_seed_same_result(self) -> None:
        a = select_rules(2, 5, rng=random.Random(1234))
        b = select_rules(2, 5, rng=random.Random(1234))
        assert a == b

    def test_intoxication_level_does_not_affect_selection(self) -> None:
        a = select_rules(1, 5, rng=random.Random(99))
        b = select_rules(5, 5, rng=random.Random(99))
        assert a == b


class TestWeightedPhase:
    def test_zero_draw_picks_first_candidate(self) -> None:
        catalog = [_t("a", Category.CAMERA), _t("b", Category.CAMERA), _t("c", Category.FILM)]
        rules = select_rules(1, 1, rng=StubRandom(0.0), catalog=catalog)
        assert [r.text for r in rules] == ["a"]

    def test_overshoot_falls_back_to_last_candidate(self) -> None:
        catalog = [_t("a", Category.CAMERA), _t("b", Category.CAMERA), _t("c", Category.FILM)]
        rules = select_rules(1, 1, rng=StubRandom(1.5), catalog=catalog)
        assert [r.text for r in rules] == ["c"]

    def test_walks_weights_in_order(self) -> None:
        catalog = [
            _t("a", Category.CAMERA, weight=1.0),
            _t("b", Category.CAMERA, weight=2.0),
            _t("c", Category.FILM, weight=1.0),
        ]
        # 0.5 * 4.0 = 2.0 → 2.0 - 1.0 = 1.0 → 1.0 - 2.0 < 0 → "b"
        rules = select_rules(1, 1, rng=StubRandom(0.5), catalog=catalog)
        assert [r.text for r in rules] == ["b"]

    def test_stops_at_two_categories_then_fills_uniformly(self) -> None:
        catalog = [
            _t("a", Category.CAMERA),
            _t("c", Category.FILM),
            _t("b", Category.CAMERA),
            _t("d", Category.FILM),
        ]
        rng = StubRandom(0.0)
        rules = select_rules(1, 4, rng=rng, catalog=catalog)
        # weighted: a, then c brings the second category; fill takes the last slot each time
        assert [r.text for r in rules] == ["a", "c", "d", "b"]
        assert rng.randrange_calls == [2, 1]

    def test_single_category_pool_never_reaches_fill_phase(self) -> None:
        catalog = [_t("a", Category.CAMERA), _t("b", Category.CAMERA), _t("c", Category.CAMERA)]
        rng = StubRandom(0.0)
        rules = select_rules(1, 3, rng=rng, catalog=catalog)
        assert [r.text for r in rules] == ["a", "b", "c"]
        assert rng.randrange_calls == []

    def test_heavier_templates_win_more_often(self) -> None:
        catalog = [_t("heavy", Category.CAMERA, weight=9.0), _t("light", Category.CAMERA, weight=1.0)]
        rng = NoShuffleRandom(7)
        heavy = sum(
            select_rules(1, 1, rng=rng, catalog=catalog)[0].text == "heavy"
            for _ in range(1000)
        )
        assert heavy > 800


# ---------------------------------------------------------------------------
# calculate_effective_drink / escalate
# ---------------------------------------------------------------------------

class TestCalculateEffectiveDrink:
    def test_adds_intoxication(self) -> None:
        assert calculate_effective_drink(DrinkLevel.SIP, 2) == DrinkLevel.PULL

    def test_caps_at_shot(self) -> None:
        assert calculate_effective_drink(DrinkLevel.PULL, 3) == DrinkLevel.SHOT

    def test_zero_intoxication_is_identity(self) -> None:
        assert calculate_effective_drink(DrinkLevel.GULP, 0) == DrinkLevel.GULP

    def test_large_intoxication_still_clamps(self) -> None:
        assert calculate_effective_drink(DrinkLevel.SIP, 1000) == 3

    def test_no_lower_clamp(self) -> None:
        assert calculate_effective_drink(DrinkLevel.SIP, -2) == -2

    def test_pure(self) -> None:
        assert calculate_effective_drink(1, 1) == calculate_effective_drink(1, 1) == 2


class TestEscalate:
    def test_level_one_keeps_base(self) -> None:
        for level in DrinkLevel:
            assert escalate(level, 1) == level

    def test_level_is_one_based(self) -> None:
        assert escalate(DrinkLevel.SIP, 3) == DrinkLevel.PULL

    def test_never_below_base(self) -> None:
        assert escalate(DrinkLevel.GULP, 0) == DrinkLevel.GULP

    def test_never_above_shot(self) -> None:
        assert escalate(DrinkLevel.PULL, 10) == DrinkLevel.SHOT


# ---------------------------------------------------------------------------
# get_drink_name
# ---------------------------------------------------------------------------

class TestGetDrinkName:
    def test_named_levels(self) -> None:
        assert get_drink_name(DrinkLevel.SIP) == {"name": "Sip", "icon": "🥤"}
        assert get_drink_name(DrinkLevel.GULP) == {"name": "Gulp", "icon": "🥃"}
        assert get_drink_name(DrinkLevel.PULL) == {"name": "Pull", "icon": "🍺"}
        assert get_drink_name(DrinkLevel.SHOT) == {"name": "Shot", "icon": "🥃"}

    def test_plain_ints(self) -> None:
        assert get_drink_name(0)["name"] == "Sip"
        assert get_drink_name(3)["name"] == "Shot"

    def test_unknown_falls_back_to_sip(self) -> None:
        assert get_drink_name(999) == {"name": "Sip", "icon": "🥤"}
        assert get_drink_name(4) == {"name": "Sip", "icon": "🥤"}
        assert get_drink_name(-1) == {"name": "Sip", "icon": "🥤"}

    def test_result_is_a_copy(self) -> None:
        get_drink_name(0)["name"] = "Bucket"
        assert get_drink_name(0)["name"] == "Sip"


# ---------------------------------------------------------------------------
# materialize_rules / generate_rules_for_video
# ---------------------------------------------------------------------------

class TestMaterializeRules:
    def test_substitutes_every_placeholder(self) -> None:
        template = _t("When {host} thanks {host}'s patrons", Category.GENERAL)
        [rule] = materialize_rules([template], 1, host="Kyle")
        assert rule.text == "When Kyle thanks Kyle's patrons"

    def test_default_host(self) -> None:
        template = _t("If {host} shows a tripod", Category.EQUIPMENT)
        [rule] = materialize_rules([template], 1)
        assert rule.text == f"If {DEFAULT_HOST} shows a tripod"

    def test_passes_category_and_weight_through(self) -> None:
        template = _t("x {host}", Category.FILM, weight=0.6, base=DrinkLevel.PULL)
        [rule] = materialize_rules([template], 1)
        assert rule.category == Category.FILM
        assert rule.weight == 0.6
        assert rule.base_drink == DrinkLevel.PULL

    def test_escalates_with_one_based_level(self) -> None:
        templates = [
            _t("a", Category.CAMERA, base=DrinkLevel.SIP),
            _t("b", Category.CAMERA, base=DrinkLevel.PULL),
        ]
        rules = materialize_rules(templates, 3)
        assert [r.effective_drink for r in rules] == [DrinkLevel.PULL, DrinkLevel.SHOT]

    def test_order_and_custom_left_to_caller(self) -> None:
        [rule] = materialize_rules([_t("a", Category.CAMERA)], 2)
        assert rule.order is None
        assert rule.is_custom is False

    def test_effective_within_bounds_for_catalog(self) -> None:
        for level in range(0, 8):
            for rule in materialize_rules(CATALOG, level):
                assert rule.base_drink <= rule.effective_drink <= DrinkLevel.SHOT

    def test_empty(self) -> None:
        assert materialize_rules([], 3) == []


class TestGenerateRulesForVideo:
    def test_generates_requested_count(self) -> None:
        rules = generate_rules_for_video("abc", "Shooting Portra", 5, 2, rng=random.Random(5))
        assert len(rules) == 5
        assert all("{host}" not in r.text for r in rules)
        assert all(DEFAULT_HOST in r.text for r in rules)

    def test_deterministic_with_seed(self) -> None:
        a = generate_rules_for_video("abc", "T", 4, 2, rng=random.Random(11))
        b = generate_rules_for_video("abc", "T", 4, 2, rng=random.Random(11))
        assert a == b

    def test_extract_host_name_default(self) -> None:
        assert extract_host_name("Anything at all") == DEFAULT_HOST
