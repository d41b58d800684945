#!/usr/bin/env python3
"""
YouTube Authentication Setup Script

Run this ONCE per channel. It opens the Google consent page, then prints
the refresh token the service needs (YT_REFRESH_TOKEN). With --write-env
the token is stored in .env directly.

Usage:
    python setup_youtube_auth.py
    python setup_youtube_auth.py --write-env
    python setup_youtube_auth.py --client-secret credentials/other.json --port 9090

Requirements:
    client_secret.json of a "Desktop app" OAuth client, downloaded from
    https://console.cloud.google.com/apis/credentials
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv, set_key

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ENV_FILE = Path(".env")


def parse_args() -> argparse.Namespace:
    # Settings read YOUTUBE_CLIENT_SECRET_PATH from .env, load it first
    load_dotenv(ENV_FILE)
    from config import settings

    parser = argparse.ArgumentParser(
        description="Obtain a YouTube refresh token for the video store service",
    )
    parser.add_argument(
        "--client-secret",
        default=settings.YOUTUBE_CLIENT_SECRET_PATH,
        help=f"OAuth client file (default: {settings.YOUTUBE_CLIENT_SECRET_PATH})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Local port receiving the OAuth callback (default: 8080)",
    )
    parser.add_argument(
        "--write-env",
        action="store_true",
        help=f"Store the token as YT_REFRESH_TOKEN in {ENV_FILE}",
    )
    return parser.parse_args()


def check_client_secret(path: str) -> bool:
    if Path(path).is_file():
        logger.info(f"✅ Using OAuth client: {path}")
        return True

    logger.error(f"❌ OAuth client file not found: {path}")
    logger.info("Create an OAuth 2.0 Client ID of type 'Desktop app' at")
    logger.info("https://console.cloud.google.com/apis/credentials,")
    logger.info(f"download its JSON and save it as {path}")
    return False


def store_refresh_token(refresh_token: str) -> None:
    ENV_FILE.touch(exist_ok=True)
    set_key(str(ENV_FILE), "YT_REFRESH_TOKEN", refresh_token)
    logger.info(f"✅ YT_REFRESH_TOKEN written to {ENV_FILE}")


def main() -> int:
    args = parse_args()

    if not check_client_secret(args.client_secret):
        return 1

    from hosting.auth.oauth_manager import run_initial_auth

    logger.info("A browser window will open on the Google consent page.")
    logger.info(
        "⚠️  Sign in with the Google account that OWNS the YouTube channel, "
        "then accept every requested permission."
    )

    refresh_token = run_initial_auth(args.client_secret, port=args.port)

    if not refresh_token:
        logger.error("❌ No refresh token received")
        logger.error(
            "Google only returns one on first consent: remove the app from "
            "https://myaccount.google.com/permissions and run this again"
        )
        return 1

    if args.write_env:
        store_refresh_token(refresh_token)
    else:
        logger.info("Add this line to .env:")
        print(f"YT_REFRESH_TOKEN={refresh_token}")

    logger.info("⚠️  Keep this token secret: it grants upload access to the channel")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("❌ Setup cancelled by user")
        sys.exit(1)
