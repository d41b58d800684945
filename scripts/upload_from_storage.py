#!/usr/bin/env python3
"""
Upload From Storage - Maintenance Script

Uploads one object of the local object store to the configured video
host, logging progress events as they are published.

Usage:
    python scripts/upload_from_storage.py match.mp4 --title "Match"
    python scripts/upload_from_storage.py match.mp4 --title "Match" --visibility unlisted
    python scripts/upload_from_storage.py match.mp4 --title "Match" --backend mock
    python scripts/upload_from_storage.py match.mp4 --title "Match" --thumbnail match.jpg

Configuration:
    - .env (YT_CLIENT_ID, YT_CLIENT_SECRET, YT_REFRESH_TOKEN, OBJECT_STORE_PATH, ...)
    - config/service.yaml (optional overrides)
"""

import argparse
import logging
import sys
import uuid
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hosting import HostingError, ItemMetadata, VideoHostBackend, Visibility
from progress import LoggingPublisher
from service import ServiceConfig, UploadError, create_video_store_service
from storage import LocalStorage, StorageError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Upload a stored object as a new video",
        epilog="""
Examples:
  %(prog)s match.mp4 --title "Match"                   # Private upload
  %(prog)s match.mp4 --title "Match" --backend mock    # Dry run against the mock host
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("key", help="Object key in the object store")

    parser.add_argument("--title", required=True, help="Video title")

    parser.add_argument("--description", default="", help="Video description")

    parser.add_argument(
        "--visibility",
        choices=[v.value for v in Visibility],
        default=Visibility.PRIVATE.value,
        help="Video visibility (default: private)",
    )

    parser.add_argument(
        "--backend",
        choices=[b.value for b in VideoHostBackend],
        default=None,
        help="Hosting platform (default: VIDEO_HOST_BACKEND)",
    )

    parser.add_argument(
        "--store",
        type=str,
        default=None,
        help="Object store directory (default: OBJECT_STORE_PATH)",
    )

    parser.add_argument(
        "--thumbnail",
        type=str,
        default=None,
        help="Object key of a thumbnail image to set after upload",
    )

    parser.add_argument(
        "--job-id",
        type=str,
        default=None,
        help="Job id keying progress events (default: random)",
    )

    args = parser.parse_args()

    config = ServiceConfig()
    store_path = Path(args.store) if args.store else config.object_store_path
    job_id = args.job_id or uuid.uuid4().hex

    # Banner
    logger.info("=" * 70)
    logger.info("Upload From Storage")
    logger.info("=" * 70)
    logger.info(f"Object: {args.key} (store: {store_path})")
    logger.info(f"Job: {job_id}")
    logger.info("=" * 70)

    try:
        service = create_video_store_service(
            backend=args.backend,
            storage=LocalStorage(base_path=store_path, create=False),
            publisher=LoggingPublisher(topic=config.progress_topic),
            config=config,
        )
    except (ValueError, RuntimeError, StorageError) as e:
        logger.error(f"❌ Failed to initialize service: {e}")
        return 1

    metadata = ItemMetadata(
        title=args.title,
        description=args.description,
        visibility=Visibility(args.visibility),
    )

    try:
        video = service.upload_video_from_storage(job_id, args.key, metadata)
    except (HostingError, StorageError, UploadError) as e:
        logger.error(f"❌ Upload failed: {e}")
        return 1

    logger.info(f"✅ Uploaded: {video.watch_url}")
    logger.info(f"  Duration: {video.duration_seconds}s")

    if args.thumbnail:
        try:
            service.set_video_thumbnail_from_storage(video.id, args.thumbnail)
        except (HostingError, StorageError) as e:
            logger.error(f"❌ Thumbnail failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
