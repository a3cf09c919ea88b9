import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from sarkari_match.catalog import seed_jobs
from sarkari_match.config import settings
from sarkari_match.services.job_repository import (
    InMemoryJobRepository,
    JobRepository,
    MongoJobRepository,
)
from sarkari_match.services.preference_store import (
    InMemoryPreferenceStore,
    MongoPreferenceStore,
    PreferenceStore,
)

logger = logging.getLogger(__name__)


class Storage:
    client: Optional[AsyncIOMotorClient] = None
    database: Optional[AsyncIOMotorDatabase] = None
    jobs: Optional[JobRepository] = None
    preferences: Optional[PreferenceStore] = None


storage = Storage()


async def connect_to_storage():
    """Create the configured repositories"""
    if settings.storage_backend == "mongo":
        storage.client = AsyncIOMotorClient(settings.mongodb_url)
        storage.database = storage.client[settings.mongodb_db_name]
        await storage.client.admin.command('ping')

        jobs = MongoJobRepository(storage.database)
        if settings.seed_catalog and await jobs.count() == 0:
            for job in reversed(seed_jobs()):
                await jobs.put(job)
            logger.info("Seeded empty jobs collection with sample catalog")

        storage.jobs = jobs
        storage.preferences = MongoPreferenceStore(storage.database)
    else:
        storage.jobs = InMemoryJobRepository(seed_jobs() if settings.seed_catalog else [])
        storage.preferences = InMemoryPreferenceStore()

    logger.info(f"Storage ready: {settings.storage_backend}")


async def close_storage():
    """Close database connection"""
    if storage.client:
        storage.client.close()
        storage.client = None


def get_job_repository() -> JobRepository:
    return storage.jobs


def get_preference_store() -> PreferenceStore:
    return storage.preferences
