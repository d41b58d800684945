"""
Validation Utilities

Input checks shared by every hosting implementation.
"""

import logging
from datetime import datetime

from hosting.constants import MAX_DESCRIPTION_BYTES, MAX_TITLE_CHARS, Visibility
from hosting.interfaces.video_host_interface import ValidationError
from hosting.models.hosted_item import ItemMetadata

logger = logging.getLogger(__name__)


def validate_metadata(meta: ItemMetadata) -> None:
    """
    Validate item metadata before it is sent anywhere.

    Rules:
    - title is required, at most MAX_TITLE_CHARS characters
    - description is at most MAX_DESCRIPTION_BYTES bytes (UTF-8), not characters
    - visibility is one of public/private/unlisted

    Raises:
        ValidationError: On the first rule violated
    """
    if meta is None:
        raise ValidationError("no video metadata provided, aborting")

    if not meta.title:
        raise ValidationError("title is required")

    if len(meta.title) > MAX_TITLE_CHARS:
        raise ValidationError(
            f"title is too long ({len(meta.title)} chars, max {MAX_TITLE_CHARS})"
        )

    description_size = len((meta.description or "").encode("utf-8"))
    if description_size > MAX_DESCRIPTION_BYTES:
        raise ValidationError(
            f"description is too long ({description_size} bytes, "
            f"max {MAX_DESCRIPTION_BYTES})"
        )

    if not isinstance(meta.visibility, Visibility):
        raise ValidationError(f"invalid visibility: {meta.visibility}")


def check_read_only_fields(
    current_id: str,
    current_created_at: datetime,
    replacement_id: str,
    replacement_created_at: datetime,
) -> None:
    """
    Fail when a replacement tries to change a read-only attribute.

    Only "id" and "createdAt" are compared. This is a best-effort guard to
    avoid a useless platform call, not an exhaustive diff.

    Raises:
        ValidationError: If id or created_at differ
    """
    if replacement_id != current_id or replacement_created_at != current_created_at:
        logger.warning(
            f"Rejected update of {current_id}: read-only attribute changed"
        )
        raise ValidationError(
            'Attempted to change a read-only attribute (either "id", or "createdAt")'
        )
