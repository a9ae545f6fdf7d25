"""
Resource modules for the Basecamp API.

Each module only composes relative paths and bodies and hands them to
BasecampClient.request through get/post/put/delete.
"""

from .accesses import (
    grant_calendar_access,
    grant_project_access,
    list_calendar_accesses,
    list_project_accesses,
    revoke_calendar_access,
    revoke_project_access,
)
from .attachments import (
    list_attachments,
    list_project_attachments,
    upload_attachment,
    upload_file,
)
from .messages import create_message, delete_message, show_message, update_message
from .people import delete_person, list_people, me, show_person
from .projects import (
    create_project,
    delete_project,
    list_archived_projects,
    list_projects,
    show_project,
    update_project,
)

__all__ = [
    "list_project_accesses",
    "grant_project_access",
    "revoke_project_access",
    "list_calendar_accesses",
    "grant_calendar_access",
    "revoke_calendar_access",
    "upload_attachment",
    "upload_file",
    "list_attachments",
    "list_project_attachments",
    "show_message",
    "create_message",
    "update_message",
    "delete_message",
    "list_people",
    "show_person",
    "me",
    "delete_person",
    "list_projects",
    "list_archived_projects",
    "show_project",
    "create_project",
    "update_project",
    "delete_project",
]
