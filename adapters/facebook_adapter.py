"""Facebook OAuth (authorization code flow) client.

``fetch_profile`` is a plain call: it either returns the profile of the user
who granted access or raises.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from app.exceptions import UnauthorizedError, UpstreamServiceError
from domain.schemas.auth_schemas import FacebookProfile

logger = logging.getLogger("cookbook.facebook")

DIALOG_URL = "https://www.facebook.com/{version}/dialog/oauth"
GRAPH_URL = "https://graph.facebook.com/{version}"
PROFILE_FIELDS = "id,name,email"


class FacebookOAuthClient:
    def __init__(
        self,
        app_id: str,
        app_secret: str,
        callback_url: str,
        client: httpx.Client,
        graph_version: str = "v12.0",
    ):
        self.app_id = app_id
        self.app_secret = app_secret
        self.callback_url = callback_url
        self.client = client
        self.dialog_url = DIALOG_URL.format(version=graph_version)
        self.graph_url = GRAPH_URL.format(version=graph_version)

    def authorization_url(self, state: Optional[str] = None) -> str:
        """URL of the login dialog the browser is sent to"""
        params = {
            "client_id": self.app_id,
            "redirect_uri": self.callback_url,
            "scope": "email",
            "response_type": "code",
        }
        if state:
            params["state"] = state
        return f"{self.dialog_url}?{urlencode(params)}"

    def fetch_profile(self, code: str) -> FacebookProfile:
        """
        Exchange ``code`` for an access token and load the user's profile.

        Raises:
            UnauthorizedError: Facebook rejected the code or token
            UpstreamServiceError: transport failure or unreadable response
        """
        token = self._get(
            f"{self.graph_url}/oauth/access_token",
            {
                "client_id": self.app_id,
                "client_secret": self.app_secret,
                "redirect_uri": self.callback_url,
                "code": code,
            },
        ).get("access_token")
        if not token:
            raise UnauthorizedError("Facebook did not issue an access token")

        data = self._get(
            f"{self.graph_url}/me", {"fields": PROFILE_FIELDS, "access_token": token}
        )
        try:
            return FacebookProfile.model_validate(data)
        except ValueError as e:
            raise UpstreamServiceError(
                "Unexpected Facebook profile payload", details={"error": str(e)}
            ) from e

    def _get(self, url: str, params: dict) -> dict:
        try:
            response = self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error("Facebook request failed on %s: %s", url, e)
            raise UpstreamServiceError(
                "Facebook unavailable", details={"error": str(e)}
            ) from e

        if response.status_code in (400, 401, 403):
            logger.warning("Facebook refused %s: %s", url, response.text)
            raise UnauthorizedError("Facebook login was rejected")
        try:
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamServiceError(
                "Facebook returned an error",
                details={"status_code": e.response.status_code},
            ) from e
        except ValueError as e:
            raise UpstreamServiceError(
                "Facebook returned invalid JSON", details={"error": str(e)}
            ) from e
        if not isinstance(data, dict):
            raise UpstreamServiceError("Unexpected Facebook payload")
        return data
