"""
Tests for the Gemini JSON client with a stub in place of the SDK client.
"""
from types import SimpleNamespace

import pytest

from app.services.gemini import GeminiService


class StubModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.requests = []

    async def generate_content(self, model, contents, config=None):
        self.requests.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_service(models):
    service = GeminiService(model_name="gemini-test")
    service.client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return service


@pytest.mark.asyncio
async def test_fenced_json_reply():
    models = StubModels(text='Here you go:\n```json\n{"workout_plan": {"notes": "ok"}}\n```\nEnjoy!')

    result = await make_service(models).generate_json("plan please")

    assert result.success is True
    assert result.data == {"workout_plan": {"notes": "ok"}}
    assert models.requests[0]["model"] == "gemini-test"
    assert models.requests[0]["contents"] == "plan please"
    assert models.requests[0]["config"].response_mime_type == "application/json"


@pytest.mark.asyncio
async def test_bare_object_inside_prose():
    models = StubModels(text='Sure! {"meal_plan": {"daily_meals": {}}} Let me know.')

    result = await make_service(models).generate_json("meals")

    assert result.success is True
    assert result.data == {"meal_plan": {"daily_meals": {}}}


@pytest.mark.asyncio
async def test_malformed_json_is_a_failure():
    models = StubModels(text='{"workout_plan": {"notes": }')

    result = await make_service(models).generate_json("plan")

    assert result.success is False
    assert result.data is None
    assert result.message == "Failed to parse AI response"


@pytest.mark.asyncio
async def test_reply_without_object_is_a_failure():
    result = await make_service(StubModels(text="I cannot help with that.")).generate_json("plan")

    assert result.success is False
    assert result.message == "Failed to parse AI response"


@pytest.mark.asyncio
async def test_missing_api_key_is_reported():
    service = GeminiService(model_name="gemini-test")
    service.client = None

    result = await service.generate_json("plan")

    assert result.success is False
    assert result.message == "AI service is not configured"
    assert result.error == "GEMINI_API_KEY missing"


@pytest.mark.asyncio
async def test_client_error_does_not_raise():
    models = StubModels(error=RuntimeError("quota exceeded"))

    result = await make_service(models).generate_json("plan")

    assert result.success is False
    assert result.message == "Failed to get a response from the AI service"
    assert result.error == "quota exceeded"
