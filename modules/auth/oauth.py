"""
Google OAuth2 identity provider.

Implements IIdentityProvider with the authorization-code flow:
- authorization_url(): where the browser starts the login
- exchange_code(): code -> access token -> OpenID userinfo profile
"""

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from shared.config import Settings
from .exceptions import UpstreamAuthError
from .models import FederatedIdentity

logger = logging.getLogger(__name__)

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"
GOOGLE_SCOPES = "openid email profile"


class GoogleIdentityProvider:
    """Exchanges Google authorization codes for user identities."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout: float = 10.0,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "GoogleIdentityProvider":
        return cls(
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret,
            redirect_uri=settings.google_redirect_uri,
        )

    def authorization_url(self) -> str:
        params = {
            "client_id": self._client_id,
            "redirect_uri": self._redirect_uri,
            "response_type": "code",
            "scope": GOOGLE_SCOPES,
            "access_type": "offline",
            "prompt": "consent",
        }
        return f"{GOOGLE_AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> FederatedIdentity:
        """
        Exchange an authorization code for the user's Google identity.

        Args:
            code: Authorization code from the OAuth callback

        Returns:
            FederatedIdentity with Google account id, email and name

        Raises:
            UpstreamAuthError: If Google rejects the code, a request fails,
                or the profile has no email or id
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                token_response = await client.post(
                    GOOGLE_TOKEN_URL,
                    headers={"Accept": "application/json"},
                    data={
                        "code": code,
                        "client_id": self._client_id,
                        "client_secret": self._client_secret,
                        "redirect_uri": self._redirect_uri,
                        "grant_type": "authorization_code",
                    },
                )
                token_data = token_response.json()
                access_token = token_data.get("access_token")
                if not access_token:
                    error_details = (
                        token_data.get("error_description")
                        or token_data.get("error")
                        or f"HTTP {token_response.status_code}"
                    )
                    logger.warning(f"Google token exchange failed: {error_details}")
                    raise UpstreamAuthError(
                        "Google did not return an access token", error_details
                    )

                user_response = await client.get(
                    GOOGLE_USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                user_response.raise_for_status()
                profile = user_response.json()
        except httpx.HTTPError as e:
            raise UpstreamAuthError("Google request failed", str(e)) from e
        except ValueError as e:
            raise UpstreamAuthError("Google returned a malformed response", str(e)) from e

        return self._map_to_identity(profile)

    def _map_to_identity(self, profile: dict) -> FederatedIdentity:
        email: Optional[str] = profile.get("email")
        subject = profile.get("id") or profile.get("sub")
        if not email or not subject:
            raise UpstreamAuthError(
                "Google profile is missing email or id",
                original_error=str(sorted(profile.keys())),
            )
        return FederatedIdentity(
            subject=str(subject),
            email=email,
            name=profile.get("name"),
        )
