"""
Tests for age relaxation, qualification ranking and the eligibility pipeline
"""
from datetime import date

import pytest

from sarkari_match.models import (
    ApplicantProfile,
    Gender,
    JobPosting,
    JobStatus,
    Qualification,
    ReservationCategory,
)
from sarkari_match.services.eligibility_service import (
    QUALIFICATION_ORDER,
    check_eligibility,
    eligibility_service,
    relax,
    satisfies,
)


def make_job(**overrides) -> JobPosting:
    data = {
        "id": "job-1",
        "job_name": "Combined Graduate Level",
        "min_age": 18,
        "max_age": 27,
        "qualification": "Graduate",
        "category": "All",
        "gender": "All",
        "state": "All India",
        "competition_level": "Medium",
        "status": "Active",
        "deadline": date(2027, 8, 24),
        "required_streams": ["Any"],
    }
    data.update(overrides)
    return JobPosting(**data)


def make_profile(**overrides) -> ApplicantProfile:
    data = {
        "age": 25,
        "qualification": "Graduate",
        "category": "General",
        "gender": "Male",
        "stream": "",
        "state_preference": "",
    }
    data.update(overrides)
    return ApplicantProfile(**data)


@pytest.mark.parametrize("max_age", [0, 21, 27, 40])
def test_relax_by_category(max_age):
    assert relax(max_age, None) == max_age
    assert relax(max_age, ReservationCategory.GENERAL) == max_age
    assert relax(max_age, ReservationCategory.OBC) == max_age + 3
    assert relax(max_age, ReservationCategory.SC) == max_age + 5
    assert relax(max_age, ReservationCategory.ST) == relax(max_age, ReservationCategory.SC)


def test_relax_covers_every_category():
    for category in ReservationCategory:
        assert relax(30, category) >= 30


def test_satisfies_is_reflexive():
    for qualification in Qualification:
        assert satisfies(qualification, qualification)


def test_satisfies_follows_hierarchy():
    assert satisfies(Qualification.POST_GRADUATE, Qualification.GRADUATE)
    assert satisfies(Qualification.TWELFTH, Qualification.TENTH)
    assert not satisfies(Qualification.GRADUATE, Qualification.POST_GRADUATE)
    assert not satisfies(Qualification.TENTH, Qualification.TWELFTH)


def test_unset_qualification_fails_everything():
    for required in QUALIFICATION_ORDER:
        assert not satisfies(None, required)


def test_scenario_obc_relaxation_reaches_limit():
    result = check_eligibility(make_job(), make_profile(age=30, category="OBC"))
    assert result.eligible
    assert result.reason == "Eligible"
    assert result.failed_check is None


def test_scenario_obc_over_relaxed_limit_hints_sc_st():
    result = check_eligibility(make_job(), make_profile(age=31, category="OBC"))
    assert not result.eligible
    assert result.failed_check == "max_age"
    assert "over age limit (30)" in result.reason.lower()
    assert "SC/ST" in result.reason


def test_general_applicant_hinted_towards_obc():
    result = check_eligibility(make_job(), make_profile(age=29, category="General"))
    assert result.reason == "Over age limit (27). Consider OBC category relaxation."


def test_general_applicant_hinted_towards_sc_st():
    result = check_eligibility(make_job(), make_profile(age=32, category="General"))
    assert result.reason == "Over age limit (27). Consider SC/ST category relaxation."


def test_unset_category_gets_same_hint_as_general():
    result = check_eligibility(make_job(), make_profile(age=30, category=""))
    assert result.reason == "Over age limit (27). Consider OBC category relaxation."


def test_no_hint_beyond_every_tier():
    result = check_eligibility(make_job(), make_profile(age=33, category="General"))
    assert result.reason == "Over age limit (27)."

    result = check_eligibility(make_job(), make_profile(age=33, category="SC"))
    assert result.reason == "Over age limit (32)."


def test_scenario_stream_mismatch():
    job = make_job(required_streams=["Science"])
    result = check_eligibility(job, make_profile(stream="Commerce"))
    assert not result.eligible
    assert result.reason == "Requires Science stream."


def test_stream_required_but_unset():
    job = make_job(required_streams=["Science", "Arts"])
    result = check_eligibility(job, make_profile())
    assert result.reason == "Requires Science or Arts stream."
    assert check_eligibility(job, make_profile(stream="Arts")).eligible


def test_any_stream_skips_check():
    assert check_eligibility(make_job(required_streams=["Any", "Science"]), make_profile()).eligible
    assert check_eligibility(make_job(required_streams=[]), make_profile()).eligible


@pytest.mark.parametrize("status", [JobStatus.DRAFT, JobStatus.CLOSED, JobStatus.EXPIRED])
def test_inactive_jobs_are_closed(status):
    result = check_eligibility(make_job(status=status), make_profile())
    assert result.failed_check == "status"
    assert result.reason == "Job application closed."


def test_gender_restriction():
    job = make_job(gender="Female")
    result = check_eligibility(job, make_profile(gender=Gender.MALE))
    assert result.reason == "Restricted to Female candidates."
    assert check_eligibility(job, make_profile(gender="Female")).eligible


def test_category_restriction_needs_exact_category():
    job = make_job(category="SC")
    assert check_eligibility(job, make_profile(category="SC")).eligible

    result = check_eligibility(job, make_profile(category="ST"))
    assert result.reason == "Restricted to SC category."

    result = check_eligibility(job, make_profile(category=None))
    assert result.failed_check == "category"


def test_age_required():
    result = check_eligibility(make_job(), make_profile(age=""))
    assert result.failed_check == "age_present"
    assert "age required" in result.reason.lower()


def test_minimum_age():
    result = check_eligibility(make_job(min_age=21), make_profile(age=20))
    assert result.reason == "Minimum age is 21."


def test_qualification_requirement():
    result = check_eligibility(make_job(qualification="Post Graduate"), make_profile())
    assert result.reason == "Requires Post Graduate."

    result = check_eligibility(make_job(qualification="10th Pass"), make_profile(qualification=""))
    assert result.failed_check == "qualification"


def test_location_preference():
    job = make_job(state="Bihar")
    assert check_eligibility(job, make_profile()).eligible
    assert check_eligibility(job, make_profile(state_preference="Bihar")).eligible

    result = check_eligibility(job, make_profile(state_preference="Uttar Pradesh"))
    assert result.reason == "Job is for Bihar residents only."

    assert check_eligibility(make_job(), make_profile(state_preference="Bihar")).eligible


def test_first_failing_check_wins():
    job = make_job(status="Closed", gender="Female", category="SC", min_age=30)
    profile = make_profile(age=None, qualification=None, category=None)
    assert check_eligibility(job, profile).failed_check == "status"

    job = make_job(gender="Female", category="SC", min_age=30)
    assert check_eligibility(job, profile).failed_check == "gender"

    job = make_job(category="SC", min_age=30)
    assert check_eligibility(job, profile).failed_check == "category"

    job = make_job(min_age=30)
    assert check_eligibility(job, profile).failed_check == "age_present"


def test_checks_run_in_documented_order():
    names = [name for name, _ in eligibility_service.checks]
    assert names == [
        "status", "gender", "category", "age_present", "min_age",
        "max_age", "qualification", "stream", "location",
    ]


def test_all_unset_profile_gets_a_verdict():
    profile = ApplicantProfile(gender="Male")
    result = check_eligibility(make_job(), profile)
    assert not result.eligible
    assert result.failed_check == "age_present"


def test_check_is_idempotent_and_read_only():
    job = make_job(required_streams=["Science"])
    profile = make_profile(age=31, category="OBC", stream="Science")
    job_before = job.model_dump()
    profile_before = profile.model_dump()

    first = check_eligibility(job, profile)
    second = check_eligibility(job, profile)

    assert first == second
    assert job.model_dump() == job_before
    assert profile.model_dump() == profile_before
