"""
License API views.

These endpoints are used by the hosting application's panel to:
- Activate the license of an installed plugin
- Check the license status of an installed plugin
"""

from dataclasses import asdict

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.handlers.activate_license_handler import ActivateLicenseHandler
from activations.infrastructure.http_licensing_authority import HttpLicensingAuthorityClient
from api.v1.licenses.serializers import (
    ActivateLicenseRequestSerializer,
    ActivateLicenseResponseSerializer,
    LicenseStatusResponseSerializer,
)
from core.conf import licensing_settings
from core.domain.value_objects import PackageName
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.application.handlers.get_license_status_handler import GetLicenseStatusHandler
from licenses.application.queries.get_license_status import GetLicenseStatusQuery
from licenses.infrastructure.plugin_registry import StaticPluginRegistry
from licenses.infrastructure.repositories.json_license_repository import JsonLicenseRepository

tracer = get_tracer(__name__)


def _license_repository() -> JsonLicenseRepository:
    """Build the license repository from current settings."""
    return JsonLicenseRepository(licensing_settings()["LICENSE_FILE"])


def _invalid_package_response(error: ValueError) -> Response:
    return Response(
        {"error": {"code": "INVALID_PACKAGE_NAME", "message": str(error)}},
        status=status.HTTP_400_BAD_REQUEST,
    )


class ActivateLicenseView(APIView):
    """View for activating licenses."""

    @extend_schema(
        operation_id="activate_license",
        summary="Activate License",
        description=(
            "Exchange the buyer's email and order ID for a license key and store it "
            "for the plugin. Fails if the plugin already has an active license."
        ),
        tags=["License API"],
        request=ActivateLicenseRequestSerializer,
        responses={
            200: ActivateLicenseResponseSerializer,
            400: {"description": "Missing email or order ID"},
            409: {"description": "License already activated"},
            422: {"description": "License not valid for this plugin or plugin version"},
            502: {"description": "Licensing authority request failed"},
        },
    )
    def post(self, request: Request, package_name: str) -> Response:
        """Activate the license of a plugin."""
        with tracer.start_as_current_span("activate_license_request") as span:
            span.set_attribute("package_name", package_name)

            try:
                PackageName(package_name)
            except ValueError as e:
                span.set_status(Status(StatusCode.ERROR, "Invalid package name"))
                return _invalid_package_response(e)

            serializer = ActivateLicenseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            handler = ActivateLicenseHandler(
                license_repository=_license_repository(),
                plugin_registry=StaticPluginRegistry.from_settings(),
                licensing_authority=HttpLicensingAuthorityClient.from_settings(),
            )
            result = async_to_sync(handler.activate_from_request)(
                package_name, serializer.validated_data
            )

            span.set_status(Status(StatusCode.OK))
            response_serializer = ActivateLicenseResponseSerializer(asdict(result))
            return Response(response_serializer.data, status=status.HTTP_200_OK)


class GetLicenseStatusView(APIView):
    """View for checking license status."""

    @extend_schema(
        operation_id="get_license_status",
        summary="Check License Status",
        description=(
            "Derive the license status of a plugin from its stored license and the "
            "installed plugin version."
        ),
        tags=["License API"],
        responses={
            200: LicenseStatusResponseSerializer,
            400: {"description": "Invalid package name"},
        },
    )
    def get(self, request: Request, package_name: str) -> Response:
        """Get the license status of a plugin."""
        with tracer.start_as_current_span("get_license_status") as span:
            span.set_attribute("package_name", package_name)

            try:
                PackageName(package_name)
            except ValueError as e:
                span.set_status(Status(StatusCode.ERROR, "Invalid package name"))
                return _invalid_package_response(e)

            handler = GetLicenseStatusHandler(
                license_repository=_license_repository(),
                plugin_registry=StaticPluginRegistry.from_settings(),
            )
            result = async_to_sync(handler.handle)(GetLicenseStatusQuery(package_name=package_name))

            span.set_attribute("status", result.status)
            span.set_status(Status(StatusCode.OK))
            return Response(LicenseStatusResponseSerializer(result).data, status=status.HTTP_200_OK)
