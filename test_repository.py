"""
Tests for the in-memory job repository and preference store
"""
import asyncio
from datetime import date

from sarkari_match.catalog import seed_jobs
from sarkari_match.models import AlertPreferences, JobPosting, JobStatus
from sarkari_match.services.job_repository import InMemoryJobRepository
from sarkari_match.services.preference_store import InMemoryPreferenceStore


def make_job(job_id: str, **overrides) -> JobPosting:
    data = {
        "id": job_id,
        "job_name": f"Post {job_id}",
        "min_age": 18,
        "max_age": 30,
        "qualification": "Graduate",
        "deadline": date(2030, 1, 1),
    }
    data.update(overrides)
    return JobPosting(**data)


def test_job_repository_crud():
    async def scenario():
        repository = InMemoryJobRepository([make_job("a"), make_job("b")])

        assert (await repository.get("a")).id == "a"
        assert await repository.get("missing") is None

        await repository.put(make_job("c"))
        assert [job.id for job in await repository.list()] == ["c", "a", "b"]

        await repository.put(make_job("a", job_name="Renamed", status="Closed"))
        jobs = await repository.list()
        assert [job.id for job in jobs] == ["c", "a", "b"]
        assert (await repository.get("a")).job_name == "Renamed"
        assert [job.id for job in await repository.list(status=JobStatus.ACTIVE)] == ["c", "b"]

        assert await repository.delete("b")
        assert not await repository.delete("b")
        assert [job.id for job in await repository.list()] == ["c", "a"]

    asyncio.run(scenario())


def test_job_repository_accepts_suspicious_postings(caplog):
    async def scenario():
        repository = InMemoryJobRepository()
        await repository.put(make_job("odd", min_age=40, max_age=30))
        return await repository.get("odd")

    with caplog.at_level("WARNING"):
        job = asyncio.run(scenario())

    assert job is not None
    assert "exceeds maximum age" in caplog.text


def test_job_repository_seeded_catalog():
    async def scenario():
        repository = InMemoryJobRepository(seed_jobs())
        return await repository.list()

    jobs = asyncio.run(scenario())
    assert jobs[0].id == "ssc-cgl-2024"


def test_preference_store_round_trip():
    async def scenario():
        store = InMemoryPreferenceStore()
        assert await store.get_alert_preferences("u1") is None

        prefs = AlertPreferences(contact="9876543210", categories=["SSC"])
        await store.save_alert_preferences("u1", prefs)
        assert await store.get_alert_preferences("u1") == prefs
        assert await store.get_alert_preferences("u2") is None

    asyncio.run(scenario())


def test_toggle_saved_job():
    async def scenario():
        store = InMemoryPreferenceStore()
        assert await store.get_saved_job_ids("u1") == []
        assert await store.toggle_saved_job("u1", "a") == ["a"]
        assert await store.toggle_saved_job("u1", "b") == ["a", "b"]
        assert await store.toggle_saved_job("u1", "a") == ["b"]
        assert await store.get_saved_job_ids("u2") == []

    asyncio.run(scenario())
