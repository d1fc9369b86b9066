#!/usr/bin/env python3
"""
Tests for the serverless function entrypoints.
"""
import json

import pytest

from app.functions import authenticate, save_reaction


@pytest.mark.integration
def test_authenticate_function_success(make_event, master_password):
    result = authenticate.handler(make_event(body={"password": master_password}), None)
    assert result["statusCode"] == 200
    assert result["headers"]["Access-Control-Allow-Origin"] == "*"
    assert json.loads(result["body"])["success"] is True


@pytest.mark.integration
def test_authenticate_function_preflight(make_event):
    result = authenticate.handler(make_event(method="OPTIONS"), None)
    assert result == {
        "statusCode": 200,
        "headers": {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Allow-Methods": "POST, OPTIONS",
            "Content-Type": "application/json"
        },
        "body": ""
    }


@pytest.mark.integration
def test_authenticate_function_audio_with_site_url(make_event, monkeypatch):
    monkeypatch.setenv("URL", "https://gift.example")
    result = authenticate.handler(make_event(body={"getAudio": True}, headers={"host": "ignored"}), None)
    assert json.loads(result["body"])["audioUrl"] == "https://gift.example/audio/surprise.mp3"


@pytest.mark.integration
def test_base64_encoded_body_is_decoded(make_event, master_password):
    event = make_event(body={"password": master_password}, base64_encoded=True)
    assert authenticate.handler(event, None)["statusCode"] == 200


@pytest.mark.integration
def test_invalid_base64_body_is_generic_failure(master_password):
    event = {"httpMethod": "POST", "headers": {}, "body": "%%%not-base64%%%", "isBase64Encoded": True}
    result = authenticate.handler(event, None)
    assert result["statusCode"] == 500


@pytest.mark.integration
def test_missing_method_is_not_allowed():
    result = save_reaction.handler({}, None)
    assert result["statusCode"] == 405


@pytest.mark.integration
def test_save_reaction_function_and_maintenance_helpers(make_event):
    result = save_reaction.handler(make_event(
        body={"reaction": "so sweet", "timestamp": "2024-02-14T10:00:00.000Z"},
        headers={"Referer": "https://gift.example/surprise"}
    ), None)
    assert result["statusCode"] == 200
    saved_id = json.loads(result["body"])["id"]

    reactions = save_reaction.get_reactions()
    assert len(reactions) == 1
    assert reactions[0]["id"] == saved_id
    assert reactions[0]["reaction"] == "so sweet"
    assert reactions[0]["referer"] == "https://gift.example/surprise"
    assert reactions[0]["timestamp"] == "2024-02-14T10:00:00.000Z"

    assert save_reaction.clear_reactions() == {"cleared": True, "count": 1}
    assert save_reaction.get_reactions() == []


@pytest.mark.integration
def test_function_buffer_is_bounded(make_event):
    for n in range(1, 601):
        save_reaction.handler(make_event(body={"reaction": f"reaction {n}"}), None)

    reactions = save_reaction.get_reactions()
    assert len(reactions) == 500
    assert [r["reaction"] for r in reactions[:2]] == ["reaction 101", "reaction 102"]
    assert reactions[-1]["reaction"] == "reaction 600"
