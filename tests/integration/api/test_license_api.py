"""
Integration tests for License API endpoints.
"""

import json
from unittest.mock import Mock, patch

import pytest
import requests
from django.urls import reverse

PACKAGE_NAME = "johannschopplich/kirby-copilot"


def _authority_response(status_code=200, body=None, reason="OK"):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    response.text = json.dumps(body)
    response.json.return_value = body
    return response


def _activate_url(package_name=PACKAGE_NAME):
    return reverse("licenses:activate-license", kwargs={"package_name": package_name})


def _status_url(package_name=PACKAGE_NAME):
    return reverse("licenses:get-license-status", kwargs={"package_name": package_name})


@pytest.mark.integration
class TestActivateLicenseAPI:
    """Integration tests for the activate endpoint."""

    def test_activate_license_success(
        self, api_client, licensing_settings, license_file, authority_response
    ):
        """Test successful activation via API."""
        with patch.object(
            requests.Session, "post", return_value=_authority_response(body=authority_response)
        ) as post:
            response = api_client.post(
                _activate_url(),
                {"email": "buyer@example.com", "orderId": "1234"},
                format="json",
            )

        assert response.status_code == 200
        assert response.json() == {
            "code": 200,
            "status": "ok",
            "message": "License key successfully activated",
        }
        assert post.call_args[0][0] == "https://licensing.test/api/activate"
        assert post.call_args[1]["json"] == {
            "packageName": PACKAGE_NAME,
            "email": "buyer@example.com",
            "orderId": "1234",
        }

        stored = json.loads(license_file.read_text(encoding="utf-8"))
        assert stored[PACKAGE_NAME] == {
            "licenseKey": "KT1-ABC123-DEF456",
            "licenseCompatibility": "^1 || ^2",
            "pluginVersion": "2.1.0",
            "createdAt": "2024-01-15 10:30:00",
        }

    def test_activate_missing_parameters(self, api_client, licensing_settings, license_file):
        """Test activation without order ID."""
        with patch.object(requests.Session, "post") as post:
            response = api_client.post(_activate_url(), {"email": "buyer@example.com"}, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "error": {
                "code": "MISSING_PARAMETERS",
                "message": 'Missing license registration parameters "email" or "orderId"',
            }
        }
        post.assert_not_called()
        assert not license_file.exists()

    def test_activate_already_activated(
        self, api_client, licensing_settings, write_license_file, authority_response
    ):
        """Test activation when an active license is stored."""
        write_license_file(
            {PACKAGE_NAME: {"licenseKey": "KT1-ABC123-DEF456", "licenseCompatibility": "^2"}}
        )

        with patch.object(requests.Session, "post") as post:
            response = api_client.post(
                _activate_url(), {"email": "buyer@example.com", "orderId": "1234"}, format="json"
            )

        assert response.status_code == 409
        assert response.json()["error"]["message"] == "License key already activated"
        post.assert_not_called()

    def test_activate_package_mismatch(
        self, api_client, licensing_settings, license_file, authority_response
    ):
        authority_response["packageName"] = "johannschopplich/kirby-seo-audit"

        with patch.object(
            requests.Session, "post", return_value=_authority_response(body=authority_response)
        ):
            response = api_client.post(
                _activate_url(), {"email": "buyer@example.com", "orderId": "1234"}, format="json"
            )

        assert response.status_code == 422
        assert response.json()["error"] == {
            "code": "PACKAGE_MISMATCH",
            "message": "License key not valid for this plugin",
        }
        assert not license_file.exists()

    def test_activate_version_incompatible(
        self, api_client, licensing_settings, license_file, authority_response
    ):
        authority_response["licenseCompatibility"] = "^1"

        with patch.object(
            requests.Session, "post", return_value=_authority_response(body=authority_response)
        ):
            response = api_client.post(
                _activate_url(), {"email": "buyer@example.com", "orderId": "1234"}, format="json"
            )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VERSION_INCOMPATIBLE"
        assert not license_file.exists()

    def test_activate_remote_error_passed_through(
        self, api_client, licensing_settings, license_file
    ):
        """Test the authority's error message reaches the caller unchanged."""
        with patch.object(
            requests.Session,
            "post",
            return_value=_authority_response(
                status_code=404, body={"error": "Order not found"}, reason="Not Found"
            ),
        ):
            response = api_client.post(
                _activate_url(), {"email": "buyer@example.com", "orderId": "9999"}, format="json"
            )

        assert response.status_code == 502
        assert response.json()["error"] == {
            "code": "REMOTE_AUTHORITY_FAILURE",
            "message": "Order not found",
        }
        assert not license_file.exists()

    def test_activate_with_corrupted_store(
        self, api_client, licensing_settings, write_license_file
    ):
        write_license_file("{not json")

        with patch.object(requests.Session, "post") as post:
            response = api_client.post(
                _activate_url(), {"email": "buyer@example.com", "orderId": "1234"}, format="json"
            )

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "STORE_CORRUPTED"
        post.assert_not_called()

    def test_activate_invalid_package_name(self, api_client, licensing_settings):
        response = api_client.post(
            _activate_url("a/b/c"), {"email": "buyer@example.com", "orderId": "1"}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_PACKAGE_NAME"


@pytest.mark.integration
class TestGetLicenseStatusAPI:
    """Integration tests for the status endpoint."""

    def test_status_inactive(self, api_client, licensing_settings):
        response = api_client.get(_status_url())

        assert response.status_code == 200
        assert response.json() == {
            "package_name": PACKAGE_NAME,
            "status": "inactive",
            "plugin_version": "2.1.0",
            "license": None,
        }

    def test_status_active(self, api_client, licensing_settings, write_license_file):
        write_license_file(
            {
                PACKAGE_NAME: {
                    "licenseKey": "KT2-ABC123-DEF456",
                    "licenseCompatibility": "^1 || ^2",
                    "pluginVersion": "2.0.0",
                    "createdAt": "2024-01-15 10:30:00",
                }
            }
        )

        response = api_client.get(_status_url())

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "active"
        assert data["license"] == {
            "key": "KT2-ABC123-DEF456",
            "generation": 2,
            "compatibility": "v1, v2",
        }

    def test_status_upgradeable(self, api_client, settings, licensing_settings, write_license_file):
        """Test status after the plugin was updated past the license range."""
        write_license_file(
            {PACKAGE_NAME: {"licenseKey": "KT1-ABC123-DEF456", "licenseCompatibility": "^1"}}
        )
        settings.LICENSING = {**licensing_settings, "PLUGIN_VERSIONS": {PACKAGE_NAME: "2.0.0"}}

        response = api_client.get(_status_url())

        assert response.json()["status"] == "upgradeable"

    def test_status_invalid(self, api_client, licensing_settings, write_license_file):
        write_license_file({PACKAGE_NAME: {"licenseKey": "KT-BROKEN", "licenseCompatibility": "^2"}})

        response = api_client.get(_status_url())

        assert response.json()["status"] == "invalid"
        assert response.json()["license"] is None

    def test_status_with_corrupted_store(self, api_client, licensing_settings, write_license_file):
        write_license_file("{not json")

        response = api_client.get(_status_url())

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "STORE_CORRUPTED"

    def test_status_with_non_string_compatibility(
        self, api_client, licensing_settings, write_license_file
    ):
        write_license_file(
            {PACKAGE_NAME: {"licenseKey": "KT1-ABC123-DEF456", "licenseCompatibility": 1}}
        )

        response = api_client.get(_status_url())

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "STORE_CORRUPTED"


@pytest.mark.integration
class TestHealthAPI:
    """Integration tests for health endpoints."""

    def test_health(self, client):
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_store(self, client, licensing_settings, write_license_file):
        write_license_file(
            {PACKAGE_NAME: {"licenseKey": "KT1-ABC123-DEF456", "licenseCompatibility": "^1"}}
        )

        response = client.get(reverse("health-store"))

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "store": "readable", "licenses": 1}

    def test_health_store_corrupted(self, client, licensing_settings, write_license_file):
        write_license_file("{not json")

        response = client.get(reverse("health-store"))

        assert response.status_code == 503
        assert response.json()["store"] == "corrupted"

    def test_health_store_invalid_encoding(self, client, licensing_settings, license_file):
        license_file.write_bytes(b'{"vendor/a": {"licenseKey": "\xff\xfe"}}')

        response = client.get(reverse("health-store"))

        assert response.status_code == 503
        assert response.json()["store"] == "corrupted"
