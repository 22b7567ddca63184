"""
Construction progress calculations.

Two formulas are in use and they do not agree:

- ``weighted_stage``: 15 points per stage in progress, plus a completed share
  that grows faster as more stages finish. Used when an entry is submitted.
- ``split_weight``: completed stages share 70% of the total, stages in
  progress earn half of a 30% share. Shown on the progress-update form.

Both are kept under explicit names; callers pick one.
"""
import math
from typing import Callable, Dict, Optional

from housing_portal.config import (
    COMPLETED_WEIGHT_PERCENT,
    CONSTRUCTION_STAGES,
    IN_PROGRESS_CREDIT,
    IN_PROGRESS_WEIGHT_PERCENT,
)
from housing_portal.models import ConstructionDetails, StageStatus

TOTAL_STAGES = len(CONSTRUCTION_STAGES)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _finish(score: float) -> int:
    return min(_round_half_up(score), 100)


def weighted_stage_progress(details: Optional[ConstructionDetails]) -> int:
    """Progress percentage with partial credit for stages in progress."""
    if details is None:
        return 0

    completed = 0
    partial = 0
    for status in details.statuses():
        if status == StageStatus.COMPLETED:
            completed += 1
        elif status == StageStatus.IN_PROGRESS:
            partial += IN_PROGRESS_CREDIT

    remaining_credit = 100 - IN_PROGRESS_CREDIT * (TOTAL_STAGES - completed)
    score = partial + (completed / TOTAL_STAGES) * remaining_credit
    return _finish(score)


def split_weight_progress(details: Optional[ConstructionDetails]) -> int:
    """Progress percentage from a fixed 70/30 completed/in-progress split."""
    if details is None:
        return 0

    completed_weight = COMPLETED_WEIGHT_PERCENT / TOTAL_STAGES
    in_progress_weight = IN_PROGRESS_WEIGHT_PERCENT / TOTAL_STAGES

    score = 0.0
    for status in details.statuses():
        if status == StageStatus.COMPLETED:
            score += completed_weight
        elif status == StageStatus.IN_PROGRESS:
            score += in_progress_weight / 2
    return _finish(score)


compute_progress = weighted_stage_progress

ProgressStrategy = Callable[[Optional[ConstructionDetails]], int]

PROGRESS_STRATEGIES: Dict[str, ProgressStrategy] = {
    "weighted_stage": weighted_stage_progress,
    "split_weight": split_weight_progress,
}


def get_progress_strategy(name: str) -> ProgressStrategy:
    """Look up a progress formula by name."""
    try:
        return PROGRESS_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown progress strategy '{name}'. "
            f"Expected one of: {', '.join(sorted(PROGRESS_STRATEGIES))}"
        ) from None
