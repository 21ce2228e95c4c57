"""
Mongo document mappers.
Render pymongo documents and write results as JSON-friendly dicts.
"""

from typing import Any, Dict

from pymongo.results import DeleteResult, InsertOneResult


class DocumentMapper:
    """Mapper for MongoDB documents and operation results."""

    @staticmethod
    def to_public(doc: Dict[str, Any]) -> Dict[str, Any]:
        """Copy of ``doc`` with its ObjectId rendered as a string"""
        out = dict(doc)
        if "_id" in out:
            out["_id"] = str(out["_id"])
        return out

    @staticmethod
    def insert_result(result: InsertOneResult) -> Dict[str, Any]:
        return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}

    @staticmethod
    def delete_result(result: DeleteResult) -> Dict[str, Any]:
        return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
