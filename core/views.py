"""
Core views for health checks and system status.
"""

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from core.conf import licensing_settings
from core.domain.exceptions import LicenseStoreCorruptedError
from licenses.infrastructure.repositories.json_license_repository import JsonLicenseRepository


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health status."""
        return JsonResponse({"status": "healthy", "service": "plugin-licensing"})


@method_decorator(csrf_exempt, name="dispatch")
class HealthStoreView(View):
    """License file health check endpoint."""

    def get(self, _request):
        """Check that the license file can be read."""
        repository = JsonLicenseRepository(licensing_settings()["LICENSE_FILE"])
        try:
            records = repository.read_all()
        except LicenseStoreCorruptedError as e:
            return JsonResponse(
                {"status": "unhealthy", "store": "corrupted", "error": e.message},
                status=503,
            )
        except OSError as e:
            return JsonResponse(
                {"status": "unhealthy", "store": "unreadable", "error": str(e)},
                status=503,
            )
        return JsonResponse({"status": "healthy", "store": "readable", "licenses": len(records)})
