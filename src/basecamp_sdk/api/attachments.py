"""Attachments: https://github.com/basecamp/bcx-api/blob/master/sections/attachments.md"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, Dict, List, Optional

from basecamp_sdk.core.client import BasecampClient


async def upload_attachment(
    client: BasecampClient,
    data: bytes,
    *,
    content_type: str = "application/octet-stream",
    timeout: float = 60.0,
) -> Dict[str, Any]:
    """
    Upload raw bytes; the body is sent as is, not JSON-encoded.
    Returns {"token": ..., "message": "Created"} on success. The token is then
    referenced from a message/comment/upload "attachments" list.
    """
    return await client.post(
        "attachments.json",
        {"binary": data},
        timeout=timeout,
        content_type=content_type,
    )


async def upload_file(
    client: BasecampClient,
    file_path: str,
    *,
    content_type: Optional[str] = None,
    timeout: float = 60.0,
) -> Dict[str, Any]:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    ctype = (
        content_type
        or mimetypes.guess_type(path.name)[0]
        or "application/octet-stream"
    )
    return await upload_attachment(
        client, path.read_bytes(), content_type=ctype, timeout=timeout
    )


async def list_attachments(
    client: BasecampClient,
) -> List[Dict[str, Any]] | Dict[str, Any]:
    return await client.get("attachments.json")


async def list_project_attachments(
    client: BasecampClient, project_id: int | str
) -> List[Dict[str, Any]] | Dict[str, Any]:
    return await client.get(f"projects/{project_id}/attachments.json")
