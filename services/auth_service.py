"""Login: turn a Facebook profile into a session user and a signed token."""

import json
import logging
import time
from typing import Any, Dict, Optional

import jwt
from sqlalchemy.orm import Session

from app.config import Settings
from app.exceptions import UnauthorizedError
from domain.mappers import UserMapper
from domain.schemas.auth_schemas import FacebookProfile, LoginResult, SessionUser
from domain.schemas.user_schemas import canonical_email
from repositories import UserRepository

logger = logging.getLogger("cookbook.auth")

JWT_ALGORITHM = "HS256"

POPUP_TEMPLATE = (
    "<html><head><title>Main</title></head><body></body>"
    "<script>var res = {payload}; "
    "if (window.opener) {{ window.opener.postMessage(res, {origin}); }} "
    "window.close();</script></html>"
)


class AuthService:
    @staticmethod
    def authenticate(db: Session, profile: FacebookProfile) -> SessionUser:
        """Match the profile against the user store; unknown users are refused"""
        if not profile.email:
            logger.warning(f"login_refused facebook_id={profile.id} reason=no_email")
            raise UnauthorizedError("User not registered, contact admin")

        user = UserRepository(db).get_by_email(canonical_email(profile.email))
        if user is None:
            logger.warning(f"login_refused email={profile.email} reason=not_registered")
            raise UnauthorizedError("User not registered, contact admin")

        logger.info(f"login_ok email={user.email} role={user.role.value}")
        return UserMapper.to_session_user(profile, user)

    @staticmethod
    def issue_token(
        user: SessionUser,
        secret: str,
        issuer: str = "recipe-app",
        lifetime_sec: int = 3600,
        now: Optional[float] = None,
    ) -> str:
        """Signed token for ``user`` valid for ``lifetime_sec`` seconds"""
        issued_at = int(now if now is not None else time.time())
        payload = {
            "sub": user.email,
            "iss": issuer,
            "iat": issued_at,
            "exp": issued_at + lifetime_sec,
            "data": {
                "avatar": user.avatar,
                "loginTime": user.loginTime,
                "name": user.name,
            },
        }
        return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)

    @staticmethod
    def decode_token(token: str, secret: str, issuer: str = "recipe-app") -> Dict[str, Any]:
        """Verify signature, issuer and expiry; returns the claims"""
        try:
            return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM], issuer=issuer)
        except jwt.ExpiredSignatureError as e:
            raise UnauthorizedError("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise UnauthorizedError(f"Invalid token: {e}") from e

    @staticmethod
    def login(db: Session, profile: FacebookProfile, settings: Settings) -> LoginResult:
        user = AuthService.authenticate(db, profile)
        token = AuthService.issue_token(
            user,
            settings.jwt_token_secret,
            issuer=settings.jwt_issuer,
            lifetime_sec=settings.jwt_lifetime_sec,
        )
        return LoginResult(user=user, token=token)

    @staticmethod
    def popup_html(result: LoginResult, target_origin: Optional[str] = None) -> str:
        """
        Page served to the login popup.

        It hands ``{user, token}`` to the window that opened it and closes
        itself. Without an explicit origin the message only reaches an opener
        on the popup's own origin.
        """
        # "<" is escaped so the payload cannot close the script element
        payload = json.dumps(result.model_dump(mode="json")).replace("<", "\\u003c")
        origin = json.dumps(target_origin) if target_origin else "window.location.origin"
        return POPUP_TEMPLATE.format(payload=payload, origin=origin)
