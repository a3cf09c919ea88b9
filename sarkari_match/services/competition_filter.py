"""
Competition tier filtering of eligible postings
"""
from typing import Dict, List, Optional

from ..models.filters import FilterState, TierFilter
from ..models.job import CompetitionLevel, JobPosting


TIER_LEVELS: Dict[TierFilter, Optional[CompetitionLevel]] = {
    TierFilter.ALL: None,
    TierFilter.LOW: CompetitionLevel.LOW,
    TierFilter.MEDIUM: CompetitionLevel.MEDIUM,
    TierFilter.HIGH_RISK: CompetitionLevel.HIGH,
}


def filter_by_competition(jobs: List[JobPosting], state: FilterState) -> List[JobPosting]:
    """
    Filter postings by competition tier

    Smart mode drops High competition postings and ignores the manual
    controls. Otherwise hide_very_high and tier_filter both apply.

    Args:
        jobs: Postings, usually already eligible
        state: Filter panel state

    Returns:
        New list with the kept postings in their original order
    """
    if state.smart_mode:
        return [job for job in jobs if job.competition_level != CompetitionLevel.HIGH]

    kept = list(jobs)
    if state.hide_very_high:
        kept = [job for job in kept if job.competition_level != CompetitionLevel.HIGH]

    level = TIER_LEVELS[state.tier_filter]
    if level is not None:
        kept = [job for job in kept if job.competition_level == level]
    return kept
