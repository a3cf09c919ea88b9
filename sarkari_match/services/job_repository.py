"""
Job catalog repositories: in-memory and MongoDB
"""
import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..models.job import JobPosting, JobStatus
from ..utils.validators import catalog_warnings

logger = logging.getLogger(__name__)


def _log_catalog_warnings(job: JobPosting) -> List[str]:
    warnings = catalog_warnings(job)
    for warning in warnings:
        logger.warning(f"Job {job.id}: {warning}")
    return warnings


class JobRepository(ABC):
    """Storage for the job catalog. Newest postings list first."""

    @abstractmethod
    async def get(self, job_id: str) -> Optional[JobPosting]:
        """Get a posting by ID"""

    @abstractmethod
    async def list(self, status: Optional[JobStatus] = None) -> List[JobPosting]:
        """List postings in catalog order, optionally by status"""

    @abstractmethod
    async def put(self, job: JobPosting) -> JobPosting:
        """Create a posting or replace the one with the same ID"""

    @abstractmethod
    async def delete(self, job_id: str) -> bool:
        """Delete a posting, returning whether it existed"""


class InMemoryJobRepository(JobRepository):
    """Job catalog held in process memory"""

    def __init__(self, jobs: Optional[Iterable[JobPosting]] = None):
        self._jobs: List[JobPosting] = list(jobs or [])

    def _index(self, job_id: str) -> Optional[int]:
        for i, job in enumerate(self._jobs):
            if job.id == job_id:
                return i
        return None

    async def get(self, job_id: str) -> Optional[JobPosting]:
        i = self._index(job_id)
        return self._jobs[i] if i is not None else None

    async def list(self, status: Optional[JobStatus] = None) -> List[JobPosting]:
        if status is None:
            return list(self._jobs)
        return [job for job in self._jobs if job.status == status]

    async def put(self, job: JobPosting) -> JobPosting:
        _log_catalog_warnings(job)
        i = self._index(job.id)
        if i is None:
            self._jobs.insert(0, job)
            logger.info(f"Job created: {job.id}")
        else:
            self._jobs[i] = job
            logger.info(f"Job updated: {job.id}")
        return job

    async def delete(self, job_id: str) -> bool:
        i = self._index(job_id)
        if i is None:
            return False
        del self._jobs[i]
        logger.info(f"Job deleted: {job_id}")
        return True


class MongoJobRepository(JobRepository):
    """Job catalog stored in the MongoDB 'jobs' collection"""

    def __init__(self, db):
        self.collection = db.jobs

    @staticmethod
    def _from_doc(doc: Dict) -> JobPosting:
        doc = {k: v for k, v in doc.items() if k not in ("_id", "sort_key")}
        return JobPosting(**doc)

    async def get(self, job_id: str) -> Optional[JobPosting]:
        try:
            doc = await self.collection.find_one({"id": job_id})
            if doc:
                return self._from_doc(doc)
            return None
        except Exception as e:
            logger.error(f"Failed to get job {job_id}: {e}")
            raise

    async def list(self, status: Optional[JobStatus] = None) -> List[JobPosting]:
        try:
            filter_query = {}
            if status is not None:
                filter_query["status"] = status.value

            cursor = self.collection.find(filter_query).sort("sort_key", -1)
            jobs = []
            async for doc in cursor:
                jobs.append(self._from_doc(doc))
            return jobs
        except Exception as e:
            logger.error(f"Failed to list jobs: {e}")
            raise

    async def put(self, job: JobPosting) -> JobPosting:
        _log_catalog_warnings(job)
        try:
            await self.collection.update_one(
                {"id": job.id},
                {
                    "$set": job.model_dump(mode="json"),
                    "$setOnInsert": {"sort_key": time.time_ns()}
                },
                upsert=True
            )
            logger.info(f"Job saved: {job.id}")
            return job
        except Exception as e:
            logger.error(f"Failed to save job {job.id}: {e}")
            raise

    async def delete(self, job_id: str) -> bool:
        try:
            result = await self.collection.delete_one({"id": job_id})
            if result.deleted_count:
                logger.info(f"Job deleted: {job_id}")
            return result.deleted_count > 0
        except Exception as e:
            logger.error(f"Failed to delete job {job_id}: {e}")
            raise

    async def count(self) -> int:
        return await self.collection.count_documents({})
