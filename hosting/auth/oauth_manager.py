"""
OAuth Manager

Handles Google OAuth 2.0 authentication for the YouTube Data API.
Uses a long-lived refresh token so the service never needs a browser.

Flow:
1. Initial setup: Run setup_youtube_auth.py once to obtain a refresh token
2. Runtime: This class builds credentials from client id/secret + refresh token
3. Token refresh: Happens automatically when needed (transparent to callers)
"""

import logging
from typing import Optional

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from hosting.constants import GOOGLE_TOKEN_URI, YOUTUBE_SCOPES


class OAuthManager:
    """
    Manages Google OAuth 2.0 credentials.

    This class:
    - Builds credentials from a refresh token (no access token stored)
    - Refreshes expired access tokens automatically
    - Validates authentication status
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str,
    ):
        """
        Initialize OAuth manager.

        Args:
            client_id: OAuth client ID of the Google project
            client_secret: OAuth client secret of the Google project
            refresh_token: Refresh token obtained with setup_youtube_auth.py

        Raises:
            ValueError: If any value is missing

        Example:
            oauth = OAuthManager(
                client_id=settings.YT_CLIENT_ID,
                client_secret=settings.YT_CLIENT_SECRET,
                refresh_token=settings.YT_REFRESH_TOKEN,
            )
        """
        self.logger = logging.getLogger(__name__)

        missing = [
            name
            for name, value in (
                ("YT_CLIENT_ID", client_id),
                ("YT_CLIENT_SECRET", client_secret),
                ("YT_REFRESH_TOKEN", refresh_token),
            )
            if not value
        ]
        if missing:
            raise ValueError(
                f"Missing YouTube credentials: {', '.join(missing)}. "
                f"Add them to the .env file",
            )

        # The access token is left empty: it is fetched on first refresh
        self.credentials: Optional[Credentials] = Credentials(
            token=None,
            refresh_token=refresh_token,
            client_id=client_id,
            client_secret=client_secret,
            token_uri=GOOGLE_TOKEN_URI,
            scopes=YOUTUBE_SCOPES,
        )

        self.logger.info("OAuth Manager initialized")

    def get_credentials(self) -> Credentials:
        """
        Get valid OAuth credentials.

        Automatically refreshes if the access token is missing or expired.

        Returns:
            Valid Google OAuth credentials

        Raises:
            RuntimeError: If credentials cannot be refreshed
        """
        if self.credentials is None:
            raise RuntimeError("Credentials were revoked")

        if not self.credentials.valid:
            self.logger.debug("Access token missing or expired, refreshing...")
            try:
                self.credentials.refresh(Request())
            except RefreshError as e:
                raise RuntimeError(
                    f"Cannot refresh YouTube credentials: {e}. "
                    "Run 'python setup_youtube_auth.py' to get a new refresh token",
                ) from e

        return self.credentials

    def is_authenticated(self) -> bool:
        """
        Check if currently authenticated with valid credentials.

        Returns:
            True if credentials are valid
        """
        try:
            return self.get_credentials().valid
        except RuntimeError:
            return False

    def revoke_credentials(self) -> None:
        """Forget current credentials (a new refresh token will be needed)"""
        self.credentials = None
        self.logger.info("Credentials revoked")


def run_initial_auth(client_secret_path: str, port: int = 8080) -> Optional[str]:
    """
    Run initial OAuth authentication flow.

    Opens a browser for the channel owner to grant permissions.

    Args:
        client_secret_path: Path to client_secret.json
        port: Local port for OAuth callback (default: 8080)

    Returns:
        The refresh token, or None if authentication failed

    Example:
        token = run_initial_auth("credentials/client_secret.json")
    """
    logger = logging.getLogger(__name__)

    try:
        flow = InstalledAppFlow.from_client_secrets_file(
            client_secret_path,
            YOUTUBE_SCOPES,
        )

        logger.info(f"Starting OAuth flow on port {port}...")
        logger.info("A browser window will open for authentication")

        # "offline" access is required to receive a refresh token
        credentials = flow.run_local_server(
            port=port,
            access_type="offline",
            prompt="consent",
        )

        if not credentials.refresh_token:
            logger.error("Authentication succeeded but no refresh token was returned")
            return None

        logger.info("✅ Authentication successful!")
        return credentials.refresh_token

    except Exception as e:
        logger.error(f"Authentication failed: {e}")
        return None
