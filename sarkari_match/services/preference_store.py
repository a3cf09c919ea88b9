"""
Per-user storage for alert preferences and bookmarked jobs
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..models.alerts import AlertPreferences

logger = logging.getLogger(__name__)


class PreferenceStore(ABC):
    """Storage for what a user saved on their device"""

    @abstractmethod
    async def get_alert_preferences(self, user_id: str) -> Optional[AlertPreferences]:
        """Get saved alert preferences, None if never saved"""

    @abstractmethod
    async def save_alert_preferences(self, user_id: str, prefs: AlertPreferences) -> AlertPreferences:
        """Replace the user's alert preferences"""

    @abstractmethod
    async def get_saved_job_ids(self, user_id: str) -> List[str]:
        """Bookmarked job IDs in the order they were saved"""

    @abstractmethod
    async def toggle_saved_job(self, user_id: str, job_id: str) -> List[str]:
        """Bookmark a job, or remove it if already bookmarked"""


class InMemoryPreferenceStore(PreferenceStore):
    """Preferences held in process memory"""

    def __init__(self):
        self._alerts: Dict[str, AlertPreferences] = {}
        self._saved: Dict[str, List[str]] = {}

    async def get_alert_preferences(self, user_id: str) -> Optional[AlertPreferences]:
        return self._alerts.get(user_id)

    async def save_alert_preferences(self, user_id: str, prefs: AlertPreferences) -> AlertPreferences:
        self._alerts[user_id] = prefs
        return prefs

    async def get_saved_job_ids(self, user_id: str) -> List[str]:
        return list(self._saved.get(user_id, []))

    async def toggle_saved_job(self, user_id: str, job_id: str) -> List[str]:
        saved = self._saved.setdefault(user_id, [])
        if job_id in saved:
            saved.remove(job_id)
        else:
            saved.append(job_id)
        return list(saved)


class MongoPreferenceStore(PreferenceStore):
    """Preferences stored in the 'alert_preferences' and 'saved_jobs' collections"""

    def __init__(self, db):
        self.db = db

    async def get_alert_preferences(self, user_id: str) -> Optional[AlertPreferences]:
        try:
            doc = await self.db.alert_preferences.find_one({"user_id": user_id})
            if doc:
                return AlertPreferences(**doc["preferences"])
            return None
        except Exception as e:
            logger.error(f"Failed to get alert preferences: {e}")
            raise

    async def save_alert_preferences(self, user_id: str, prefs: AlertPreferences) -> AlertPreferences:
        try:
            await self.db.alert_preferences.update_one(
                {"user_id": user_id},
                {"$set": {"user_id": user_id, "preferences": prefs.model_dump(mode="json")}},
                upsert=True
            )
            logger.info(f"Alert preferences saved: {user_id}")
            return prefs
        except Exception as e:
            logger.error(f"Failed to save alert preferences: {e}")
            raise

    async def get_saved_job_ids(self, user_id: str) -> List[str]:
        try:
            doc = await self.db.saved_jobs.find_one({"user_id": user_id})
            return list(doc["job_ids"]) if doc else []
        except Exception as e:
            logger.error(f"Failed to get saved jobs: {e}")
            raise

    async def toggle_saved_job(self, user_id: str, job_id: str) -> List[str]:
        try:
            saved = await self.get_saved_job_ids(user_id)
            if job_id in saved:
                update = {"$pull": {"job_ids": job_id}}
            else:
                update = {"$addToSet": {"job_ids": job_id}}
            await self.db.saved_jobs.update_one({"user_id": user_id}, update, upsert=True)
            return await self.get_saved_job_ids(user_id)
        except Exception as e:
            logger.error(f"Failed to toggle saved job: {e}")
            raise
