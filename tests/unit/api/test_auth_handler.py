#!/usr/bin/env python3
"""
Tests for the authentication handler request/response contract.
"""
import pytest

from app.api.http import CORS_HEADERS


@pytest.mark.unit
@pytest.mark.parametrize("body", [None, "", "{not json", {"password": "x"}])
def test_preflight_returns_empty_success(auth_handler, make_request, body):
    response = auth_handler.handle(make_request(method="OPTIONS", body=body))
    assert response.status_code == 200
    assert response.body == ""
    assert response.headers == CORS_HEADERS


@pytest.mark.unit
@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE", "HEAD"])
def test_other_methods_not_allowed(auth_handler, make_request, method):
    response = auth_handler.handle(make_request(method=method, body="{not json"))
    assert response.status_code == 405
    assert response.json() == {"success": False, "error": "Method not allowed. Use POST."}


@pytest.mark.unit
def test_lowercase_method_is_accepted(auth_handler, make_request, master_password):
    response = auth_handler.handle(make_request(method="post", body={"password": master_password}))
    assert response.status_code == 200


@pytest.mark.unit
def test_correct_password(auth_handler, make_request, master_password):
    response = auth_handler.handle(make_request(body={"password": master_password}))
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Authentication successful! Preparing your surprise..."
    }
    assert response.headers == CORS_HEADERS


@pytest.mark.unit
@pytest.mark.parametrize("attempt", ["Open-sesame", "open-sesame ", "open", "🙂"])
def test_wrong_password(auth_handler, make_request, master_password, attempt):
    response = auth_handler.handle(make_request(body={"password": attempt}))
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Oops! Try Again!!"}


@pytest.mark.unit
@pytest.mark.parametrize("body", [None, "", {}, {"password": ""}, {"password": None}, {"getAudio": False}])
def test_password_required(auth_handler, make_request, master_password, body):
    response = auth_handler.handle(make_request(body=body))
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Password is required"}


@pytest.mark.unit
@pytest.mark.parametrize("attempt", ["open-sesame", "anything"])
def test_missing_secret_is_server_error(auth_handler, make_request, attempt):
    response = auth_handler.handle(make_request(body={"password": attempt}))
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Server configuration error. Please contact administrator."
    }


@pytest.mark.unit
def test_audio_url_with_configured_site(auth_handler, make_request, monkeypatch):
    monkeypatch.setenv("SITE_URL", "https://x.com")
    monkeypatch.setenv("AUDIO_URL", "/a.mp3")
    response = auth_handler.handle(make_request(body={"getAudio": True}))
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "audioUrl": "https://x.com/a.mp3",
        "message": "Audio URL retrieved successfully"
    }


@pytest.mark.unit
def test_absolute_audio_url_unchanged(auth_handler, make_request, monkeypatch):
    monkeypatch.setenv("AUDIO_URL", "https://cdn.example/a.mp3")
    response = auth_handler.handle(make_request(body={"getAudio": True}, headers={"Host": "gift.example"}))
    assert response.json()["audioUrl"] == "https://cdn.example/a.mp3"


@pytest.mark.unit
def test_audio_url_derived_from_headers(auth_handler, make_request):
    response = auth_handler.handle(make_request(
        body={"getAudio": True},
        headers={"Host": "gift.example", "X-Forwarded-Proto": "http"}
    ))
    assert response.json()["audioUrl"] == "http://gift.example/audio/surprise.mp3"


@pytest.mark.unit
def test_audio_mode_ignores_password(auth_handler, make_request):
    response = auth_handler.handle(make_request(body={"getAudio": True, "password": "wrong"}))
    assert response.status_code == 200
    assert response.json()["audioUrl"] == "https://your-site.netlify.app/audio/surprise.mp3"


@pytest.mark.unit
@pytest.mark.parametrize("body", ["{not json", "[1, 2]", "null", "\"text\""])
def test_unparsable_body_is_generic_failure(auth_handler, make_request, master_password, body):
    response = auth_handler.handle(make_request(body=body))
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Authentication failed due to server error",
        "details": "Contact support"
    }


@pytest.mark.unit
def test_error_details_exposed_in_development(auth_handler, make_request, development_env):
    response = auth_handler.handle(make_request(body="{not json"))
    payload = response.json()
    assert response.status_code == 500
    assert payload["details"] not in ("", "Contact support")
    assert "Expecting" in payload["details"]


@pytest.mark.unit
def test_unexpected_use_case_failure(make_request, master_password):
    from unittest.mock import Mock
    from app.api.handlers.auth_handler import AuthHandler

    use_case = Mock()
    use_case.verify_password.side_effect = RuntimeError("boom")
    response = AuthHandler(use_case=use_case).handle(make_request(body={"password": "x"}))
    assert response.status_code == 500
    assert response.json()["details"] == "Contact support"
