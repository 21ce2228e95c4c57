"""User administration routes"""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from pymongo.database import Database
from sqlalchemy.orm import Session
import logging

from adapters import WelcomeMailer
from api.dependencies import get_db, get_mailer, get_mongo_db
from app.exceptions import ServiceError
from domain.mappers import UserMapper
from domain.schemas.user_schemas import RoleUpdate, UserCreate
from services.admin_service import AdminService

router = APIRouter(prefix="/api/admin", tags=["Admin"])
logger = logging.getLogger("cookbook.api.admin")


@router.get("")
def list_users(db: Session = Depends(get_db)):
    """Return all registered users."""
    try:
        users = AdminService.list_users(db)
    except Exception as e:
        logger.exception("Error listing users")
        raise HTTPException(status_code=500, detail=f"Failed to list users: {str(e)}")
    return {"result": [UserMapper.to_response(u) for u in users]}


@router.post("")
def add_user(
    user: UserCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    mailer: WelcomeMailer = Depends(get_mailer),
):
    """Register a user and send them a welcome mail after responding."""
    try:
        created = AdminService.add_user(db, user)
    except ServiceError:
        raise
    except Exception as e:
        logger.exception("Error adding user %s", user.email)
        raise HTTPException(status_code=500, detail=f"Failed to add user: {str(e)}")

    background_tasks.add_task(mailer.send_welcome, created.email, created.name)
    return {"result": UserMapper.to_response(created)}


@router.put("/{email}")
def update_role(email: str, body: RoleUpdate, db: Session = Depends(get_db)):
    """Change the role of a user."""
    try:
        count = AdminService.update_role(db, email, body.role)
    except Exception as e:
        logger.exception("Error updating role of %s", email)
        raise HTTPException(status_code=500, detail=f"Failed to update user: {str(e)}")
    return {"result": {"updated": count}}


@router.delete("/{email}")
def delete_user(
    email: str,
    db: Session = Depends(get_db),
    mongo_db: Database = Depends(get_mongo_db),
):
    """Delete a user and all of their plans."""
    try:
        return AdminService.delete_user(db, mongo_db, email)
    except Exception as e:
        logger.exception("Error deleting user %s", email)
        raise HTTPException(status_code=500, detail=f"Failed to delete user: {str(e)}")
