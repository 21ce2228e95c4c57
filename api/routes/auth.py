"""Facebook login routes.

The frontend opens ``/auth/facebook`` in a popup; the callback page posts
``{user, token}`` back to the opener window and closes itself.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from adapters import FacebookOAuthClient
from api.dependencies import get_db, get_facebook, get_settings
from app.config import Settings
from app.exceptions import ServiceError, UnauthorizedError
from services.auth_service import AuthService

router = APIRouter(prefix="/auth/facebook", tags=["Auth"])
logger = logging.getLogger("cookbook.api.auth")


@router.get("")
def facebook_login(facebook: FacebookOAuthClient = Depends(get_facebook)):
    """Redirect the browser to the Facebook login dialog"""
    return RedirectResponse(facebook.authorization_url())


@router.get("/callback", response_class=HTMLResponse)
def facebook_callback(
    code: Optional[str] = Query(default=None),
    error: Optional[str] = Query(default=None),
    error_description: Optional[str] = Query(default=None),
    facebook: FacebookOAuthClient = Depends(get_facebook),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Finish the login started by ``/auth/facebook``.

    Only users already registered by an admin receive a token; everyone
    else gets a 401.
    """
    if error or not code:
        logger.warning("Facebook login cancelled: %s %s", error, error_description)
        raise UnauthorizedError("Facebook login was cancelled")

    profile = facebook.fetch_profile(code)
    try:
        result = AuthService.login(db, profile, settings)
    except ServiceError:
        raise
    except Exception as e:
        logger.exception("Error logging in %s", profile.email)
        raise HTTPException(status_code=500, detail=f"Failed to log in: {str(e)}")

    logger.info("Token issued for %s", result.user.email)
    return HTMLResponse(AuthService.popup_html(result, settings.auth_message_origin))
