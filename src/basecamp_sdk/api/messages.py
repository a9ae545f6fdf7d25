"""Messages: https://github.com/basecamp/bcx-api/blob/master/sections/messages.md"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from basecamp_sdk.core.client import BasecampClient


def _message_path(project_id: int | str, message_id: int | str) -> str:
    return f"projects/{project_id}/messages/{message_id}.json"


async def show_message(
    client: BasecampClient, project_id: int | str, message_id: int | str
) -> Dict[str, Any]:
    return await client.get(_message_path(project_id, message_id))


async def create_message(
    client: BasecampClient, project_id: int | str, params: Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Post a message to a project.
    params: {subject, content, subscribers?, attachments?}
    Returns the created message with message="Created" on 201.
    """
    return await client.post(f"projects/{project_id}/messages.json", params)


async def update_message(
    client: BasecampClient,
    project_id: int | str,
    message_id: int | str,
    params: Mapping[str, Any],
) -> Dict[str, Any]:
    return await client.put(_message_path(project_id, message_id), params)


async def delete_message(
    client: BasecampClient, project_id: int | str, message_id: int | str
) -> Dict[str, Any]:
    return await client.delete(_message_path(project_id, message_id))
