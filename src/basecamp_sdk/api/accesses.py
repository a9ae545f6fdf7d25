"""Accesses: https://github.com/basecamp/bcx-api/blob/master/sections/accesses.md"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from basecamp_sdk.core.client import BasecampClient


def _grant_body(
    ids: Optional[Iterable[int | str]], email_addresses: Optional[Iterable[str]]
) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    if ids:
        body["ids"] = list(ids)
    if email_addresses:
        body["email_addresses"] = list(email_addresses)
    if not body:
        raise ValueError("Provide at least one of ids or email_addresses.")
    return body


async def list_project_accesses(
    client: BasecampClient, project_id: int | str
) -> List[Dict[str, Any]] | Dict[str, Any]:
    """People with access to a project, or a status descriptor."""
    return await client.get(f"projects/{project_id}/accesses.json")


async def grant_project_access(
    client: BasecampClient,
    project_id: int | str,
    *,
    ids: Optional[Iterable[int | str]] = None,
    email_addresses: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    return await client.post(
        f"projects/{project_id}/accesses.json", _grant_body(ids, email_addresses)
    )


async def revoke_project_access(
    client: BasecampClient, project_id: int | str, person_id: int | str
) -> Dict[str, Any]:
    return await client.delete(f"projects/{project_id}/accesses/{person_id}.json")


async def list_calendar_accesses(
    client: BasecampClient, calendar_id: int | str
) -> List[Dict[str, Any]] | Dict[str, Any]:
    return await client.get(f"calendars/{calendar_id}/accesses.json")


async def grant_calendar_access(
    client: BasecampClient,
    calendar_id: int | str,
    *,
    ids: Optional[Iterable[int | str]] = None,
    email_addresses: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    return await client.post(
        f"calendars/{calendar_id}/accesses.json", _grant_body(ids, email_addresses)
    )


async def revoke_calendar_access(
    client: BasecampClient, calendar_id: int | str, person_id: int | str
) -> Dict[str, Any]:
    return await client.delete(f"calendars/{calendar_id}/accesses/{person_id}.json")
