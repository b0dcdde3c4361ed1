"""Mapping from grade tiers to the stamp images supplied with a quiz."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from stamp_quiz.core.models import GradeTier

T = TypeVar("T")


def select_stamp(stamps: Sequence[T], tier: GradeTier) -> T | None:
    """Pick the stamp for a tier from a list ordered lowest tier first.

    Tiers are counted down from the end of the list, so the last stamp is
    always the perfect one. A tier whose slot would fall before the start of
    the list gets no stamp, except the lowest tier, which always uses the
    first stamp.
    """
    if not stamps:
        return None
    if tier is GradeTier.LOWEST:
        return stamps[0]
    offset = GradeTier.PERFECT - tier + 1
    if len(stamps) < offset:
        return None
    return stamps[len(stamps) - offset]
