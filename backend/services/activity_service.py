# services/activity_service.py
"""
Activity Service

Timeline of things that happened in the dashboard (orders, enquiries,
visits, test results). Newest first everywhere, by insertion order.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from models.record_schema import ActivityCreate
from utils.logger import logger
from utils.store import get_collection


class ActivityService:

    def __init__(self):
        self.activities = get_collection("activities")

    def list_activities(self) -> List[Dict[str, Any]]:
        return list(reversed(self.activities.all()))

    def by_type(self, activity_type: str) -> List[Dict[str, Any]]:
        return [a for a in self.list_activities() if a["type"] == activity_type]

    def by_category(self, category: str) -> List[Dict[str, Any]]:
        return [a for a in self.list_activities() if a["category"] == category]

    def create(self, activity: ActivityCreate) -> Dict[str, Any]:
        record = self.activities.insert(activity.model_dump())
        logger.info(f"📝 [Activity] {record['type']}: {record['title']}")
        return record

    def record(
        self,
        activity_type: str,
        title: str,
        description: str,
        category: str,
        status: str,
        related_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Shortcut used by other services, timestamped now"""
        return self.create(ActivityCreate(
            type=activity_type,
            title=title,
            description=description,
            timestamp=datetime.now(timezone.utc).isoformat(),
            category=category,
            status=status,
            related_id=related_id,
            metadata=metadata,
        ))


# Singleton instance
_activity_service: Optional[ActivityService] = None


def get_activity_service() -> ActivityService:
    """Return the ActivityService singleton"""
    global _activity_service
    if _activity_service is None:
        _activity_service = ActivityService()
    return _activity_service
