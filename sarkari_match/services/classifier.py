"""
Keyword classifier that tags job postings with a subject category
"""
from typing import Tuple

from ..models.job import ALL_INDIA, CategoryTag, JobPosting


# Checked in order; the first rule with a keyword in the job name wins
CATEGORY_KEYWORDS: Tuple[Tuple[CategoryTag, Tuple[str, ...]], ...] = (
    (CategoryTag.SSC, ("ssc",)),
    (CategoryTag.BANKING, ("bank", "sbi", "ibps")),
    (CategoryTag.DEFENCE, ("police", "army", "agniveer", "defence")),
    (CategoryTag.TEACHING, ("teacher", "pgt", "tgt")),
    (CategoryTag.RAILWAYS, ("rrb", "railway")),
)


def classify(job: JobPosting) -> CategoryTag:
    """
    Classify a posting into a category tag

    Args:
        job: Posting to classify

    Returns:
        The first keyword category matching the job name, STATE_GOVT for
        unmatched state postings, OTHER otherwise
    """
    name = job.job_name.lower()
    for tag, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return tag
    if job.state != ALL_INDIA:
        return CategoryTag.STATE_GOVT
    return CategoryTag.OTHER
