import pytest

from stamp_quiz.core.models import GradeTier
from stamp_quiz.core.stamp_selector import select_stamp

FULL_SET = ["lowest", "low", "mid", "high", "perfect"]


@pytest.mark.parametrize("tier", list(GradeTier))
def test_full_stamp_set_maps_one_to_one(tier: GradeTier) -> None:
    assert select_stamp(FULL_SET, tier) == FULL_SET[tier]


def test_short_stamp_list_counts_from_the_top() -> None:
    stamps = ["try_again", "perfect"]
    assert select_stamp(stamps, GradeTier.PERFECT) == "perfect"
    assert select_stamp(stamps, GradeTier.HIGH) == "try_again"
    assert select_stamp(stamps, GradeTier.MID) is None
    assert select_stamp(stamps, GradeTier.LOW) is None
    assert select_stamp(stamps, GradeTier.LOWEST) == "try_again"


def test_no_stamps() -> None:
    assert select_stamp([], GradeTier.PERFECT) is None
