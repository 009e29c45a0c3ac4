"""
GUI Application Framework endpoints.

Covers the three stages of an extension's life on the console:
- application creation tasks (upload a zip, follow the install task)
- application definitions (the installed manifest, its user roles)
- applications (running instances) and the named services they register

Uploads send the zip archive as the raw ``application/zip`` request body.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..http.context import CallContext
from ..http.options import Option, with_param
from .base import ACCEPTED, CREATED, OK, Endpoint, PaginatedResponse, path_segment


CREATION_TASKS = "gui_app_framework/application_creation_task"
DEFINITIONS = "gui_app_framework/application_definitions"
APPLICATIONS = "gui_app_framework/applications"
NAMED_SERVICES = "gui_app_framework/named_services"

CANCEL_REQUEST = {"status": "CANCELLED"}

UPLOADED = CREATED + ACCEPTED


class GUIAppFrameworkEndpoint(Endpoint):
    """
    Wrappers for ``/gui_app_framework``.
    """

    # Application creation tasks

    def list_application_creation_tasks(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, CREATION_TASKS, fields, filter, "", min_item, max_item)

    def create_application_creation_task(
        self,
        ctx: Optional[CallContext],
        archive_path: str,
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Upload an application zip and start installing it.

        Args:
            ctx: Call context
            archive_path: Path to the application zip archive
            fields: Optional field selection for the returned status

        Returns:
            The creation task status (poll it with ``get_application_creation_task``)

        Raises:
            IntegrationError: If the archive cannot be read
            APIError: If QRadar rejects the upload
        """
        return self._upload(ctx, "POST", CREATION_TASKS, archive_path, fields, expected=UPLOADED)

    def get_application_creation_task(self, ctx: Optional[CallContext], task_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{CREATION_TASKS}/{path_segment(task_id)}", fields)

    def cancel_application_creation_task(
        self,
        ctx: Optional[CallContext],
        task_id: int,
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx, "POST", f"{CREATION_TASKS}/{path_segment(task_id)}", CANCEL_REQUEST, fields, expected=OK
        )

    def get_application_creation_task_auth(
        self,
        ctx: Optional[CallContext],
        task_id: int,
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Retrieve the authorisation request an application asks for at install time.
        """
        return self._get(ctx, f"{CREATION_TASKS}/{path_segment(task_id)}/auth", fields)

    def update_application_creation_task_auth(
        self,
        ctx: Optional[CallContext],
        task_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Answer the authorisation request, e.g. ``{"user_id": "admin"}``.
        """
        return self._send(
            ctx, "POST", f"{CREATION_TASKS}/{path_segment(task_id)}/auth", data, fields, expected=UPLOADED
        )

    # Application definitions

    def list_application_definitions(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, DEFINITIONS, fields, filter, "", min_item, max_item)

    def create_application_definition(
        self,
        ctx: Optional[CallContext],
        archive_path: str,
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._upload(ctx, "POST", DEFINITIONS, archive_path, fields, expected=UPLOADED)

    def get_application_definition(
        self,
        ctx: Optional[CallContext],
        definition_id: int,
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._get(ctx, f"{DEFINITIONS}/{path_segment(definition_id)}", fields)

    def cancel_application_definition(
        self,
        ctx: Optional[CallContext],
        definition_id: int,
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx, "POST", f"{DEFINITIONS}/{path_segment(definition_id)}", CANCEL_REQUEST, fields, expected=OK
        )

    def update_application_definition(
        self,
        ctx: Optional[CallContext],
        definition_id: int,
        archive_path: str,
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Replace an application definition with a new zip archive.
        """
        return self._upload(
            ctx, "PUT", f"{DEFINITIONS}/{path_segment(definition_id)}", archive_path, fields, expected=UPLOADED
        )

    def delete_application_definition(self, ctx: Optional[CallContext], definition_id: int) -> None:
        self._delete(ctx, f"{DEFINITIONS}/{path_segment(definition_id)}")

    def list_user_role_ids(
        self,
        ctx: Optional[CallContext],
        definition_id: int,
        fields: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(
            ctx, f"{DEFINITIONS}/{path_segment(definition_id)}/user_role_id", fields, "", "", min_item, max_item
        )

    def add_user_role_id(
        self,
        ctx: Optional[CallContext],
        definition_id: int,
        user_role_id: int,
        fields: str = "",
    ) -> Dict[str, Any]:
        endpoint = f"{DEFINITIONS}/{path_segment(definition_id)}/user_role_id/{path_segment(user_role_id)}"
        return self._send(ctx, "POST", endpoint, fields=fields, expected=CREATED)

    def delete_user_role_id(self, ctx: Optional[CallContext], definition_id: int, user_role_id: int) -> None:
        self._delete(ctx, f"{DEFINITIONS}/{path_segment(definition_id)}/user_role_id/{path_segment(user_role_id)}")

    # Applications

    def list_applications(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, APPLICATIONS, fields, filter, "", min_item, max_item)

    def install_application(
        self,
        ctx: Optional[CallContext],
        application_definition_id: int,
        security_profile_id: Optional[int] = None,
        force_multitenancy_safe: bool = False,
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Create an application instance from an installed definition.
        """
        options: List[Option] = [
            with_param("application_definition_id", application_definition_id),
            with_param("force_multitenancy_safe", force_multitenancy_safe),
        ]
        if security_profile_id is not None:
            options.append(with_param("security_profile_id", security_profile_id))
        return self._send(ctx, "POST", APPLICATIONS, fields=fields, options=options, expected=UPLOADED)

    def get_application(self, ctx: Optional[CallContext], application_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{APPLICATIONS}/{path_segment(application_id)}", fields)

    def update_application(
        self,
        ctx: Optional[CallContext],
        application_id: int,
        oauth_user_id: Optional[int] = None,
        security_profile_id: Optional[int] = None,
        status: str = "",
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Start/stop an application (``status="RUNNING"``/``"STOPPED"``) or change
        the user and security profile it runs as.
        """
        options: List[Option] = []
        if oauth_user_id is not None:
            options.append(with_param("oauth_user_id", oauth_user_id))
        if security_profile_id is not None:
            options.append(with_param("security_profile_id", security_profile_id))
        if status:
            options.append(with_param("status", status))
        return self._send(
            ctx,
            "POST",
            f"{APPLICATIONS}/{path_segment(application_id)}",
            fields=fields,
            options=options,
            expected=UPLOADED,
        )

    def upgrade_application(
        self,
        ctx: Optional[CallContext],
        application_id: int,
        archive_path: str,
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._upload(
            ctx, "PUT", f"{APPLICATIONS}/{path_segment(application_id)}", archive_path, fields, expected=UPLOADED
        )

    def delete_application(self, ctx: Optional[CallContext], application_id: int) -> None:
        self._delete(ctx, f"{APPLICATIONS}/{path_segment(application_id)}")

    # Named services

    def list_named_services(
        self,
        ctx: Optional[CallContext],
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, NAMED_SERVICES, min_item=min_item, max_item=max_item)

    def get_named_service(self, ctx: Optional[CallContext], uuid: str) -> Dict[str, Any]:
        return self._get(ctx, f"{NAMED_SERVICES}/{path_segment(uuid)}")
