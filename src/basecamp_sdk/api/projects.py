from __future__ import annotations

from typing import Any, Dict, List, Mapping

from basecamp_sdk.core.client import BasecampClient


async def list_projects(client: BasecampClient) -> List[Dict[str, Any]] | Dict[str, Any]:
    return await client.get("projects.json")


async def list_archived_projects(
    client: BasecampClient,
) -> List[Dict[str, Any]] | Dict[str, Any]:
    return await client.get("projects/archived.json")


async def show_project(client: BasecampClient, project_id: int | str) -> Dict[str, Any]:
    return await client.get(f"projects/{project_id}.json")


async def create_project(
    client: BasecampClient, params: Mapping[str, Any]
) -> Dict[str, Any]:
    """params: {name, description?}"""
    return await client.post("projects.json", params)


async def update_project(
    client: BasecampClient, project_id: int | str, params: Mapping[str, Any]
) -> Dict[str, Any]:
    return await client.put(f"projects/{project_id}.json", params)


async def delete_project(
    client: BasecampClient, project_id: int | str
) -> Dict[str, Any]:
    return await client.delete(f"projects/{project_id}.json")
