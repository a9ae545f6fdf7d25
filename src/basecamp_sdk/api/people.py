from __future__ import annotations

from typing import Any, Dict, List

from basecamp_sdk.core.client import BasecampClient


async def list_people(client: BasecampClient) -> List[Dict[str, Any]] | Dict[str, Any]:
    return await client.get("people.json")


async def show_person(client: BasecampClient, person_id: int | str) -> Dict[str, Any]:
    return await client.get(f"people/{person_id}.json")


async def me(client: BasecampClient) -> Dict[str, Any]:
    """The person the current credentials belong to."""
    return await client.get("people/me.json")


async def delete_person(
    client: BasecampClient, person_id: int | str
) -> Dict[str, Any]:
    return await client.delete(f"people/{person_id}.json")
