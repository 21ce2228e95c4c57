"""Weekly meal plan persistence."""

from datetime import datetime, timezone
from typing import Any, Dict, List
import logging

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database

from app.exceptions import ServiceValidationError
from domain.mappers import DocumentMapper
from domain.schemas.plan_schemas import RecipePlan
from domain.schemas.user_schemas import canonical_email
from repositories import PlanRepository

logger = logging.getLogger("cookbook.plan")

# Sent by the client for display only
DISPLAY_ONLY_FIELDS = ("username", "useravatar")


class PlanService:
    """Business logic for weekly plans"""

    @staticmethod
    def list_plans(mongo_db: Database, useremail: str) -> List[Dict[str, Any]]:
        docs = PlanRepository(mongo_db).find_by_user(canonical_email(useremail))
        return [DocumentMapper.to_public(d) for d in docs]

    @staticmethod
    def save_plan(mongo_db: Database, useremail: str, plan: RecipePlan) -> Dict[str, Any]:
        """Insert a new plan owned by ``useremail`` (never deduplicated)"""
        useremail = canonical_email(useremail)
        doc = plan.model_dump()
        for field in DISPLAY_ONLY_FIELDS:
            doc.pop(field, None)
        doc.pop("_id", None)
        doc["useremail"] = useremail
        doc["ts"] = datetime.now(timezone.utc)

        result = PlanRepository(mongo_db).insert(doc)
        logger.info(
            f"plan_saved useremail={useremail} week={plan.weekStart} oid={result.inserted_id}"
        )
        return DocumentMapper.insert_result(result)

    @staticmethod
    def delete_plan(mongo_db: Database, oid: str) -> Dict[str, Any]:
        """Delete a plan by id; deleting a missing plan also succeeds"""
        try:
            object_id = ObjectId(oid)
        except (InvalidId, TypeError):
            raise ServiceValidationError(f"Invalid plan id: {oid}")

        result = PlanRepository(mongo_db).delete_by_id(object_id)
        logger.info(f"plan_deleted oid={oid} deleted={result.deleted_count}")
        return DocumentMapper.delete_result(result)
