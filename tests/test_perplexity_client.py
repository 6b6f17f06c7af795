import json
from datetime import datetime

import httpx
import pytest

from scholar_api.core.errors import AIServiceError
from scholar_api.schemas.schemas import StudentProfile
from scholar_api.services.perplexity_client import PerplexityClient, build_essay_prompt


def completion_body(content):
    return {
        "id": "cmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "sonar",
        "citations": ["https://example.org/scholarship"],
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }


def make_client(handler):
    """A PerplexityClient whose HTTP traffic goes to `handler`; returns (client, requests)."""
    seen = []

    def record(request):
        seen.append(request)
        return handler(request)

    http_client = httpx.Client(transport=httpx.MockTransport(record))
    client = PerplexityClient(
        api_key="pplx-test", base_url="https://api.perplexity.test", http_client=http_client
    )
    return client, seen


def make_profile(**overrides):
    data = {
        "user_id": 1,
        "email": "ana@example.com",
        "full_name": "Ana Lopez",
        "current_gpa": "3.9",
        "major_of_interest": "Marine Biology",
        "personal_statement": "I grew up on the coast.",
        "extracurriculars": "Beach cleanup lead",
        "created_at": datetime(2025, 1, 1),
        "updated_at": datetime(2025, 1, 1),
    }
    data.update(overrides)
    return StudentProfile(**data)


def test_search_returns_upstream_body_unchanged():
    body = completion_body("Here are three scholarships.")
    client, seen = make_client(lambda request: httpx.Response(200, json=body))

    assert client.search("nursing students in Ohio") == body

    request = seen[0]
    assert request.url.path.endswith("/chat/completions")
    assert request.headers["authorization"] == "Bearer pplx-test"
    payload = json.loads(request.content)
    assert payload["model"] == "sonar"
    assert payload["messages"] == [
        {"role": "system", "content": "You are a search assistant."},
        {"role": "user", "content": "Find scholarships for: nursing students in Ohio"},
    ]


def test_search_failure_is_not_retried():
    client, seen = make_client(lambda request: httpx.Response(503, json={"error": "busy"}))

    with pytest.raises(AIServiceError):
        client.search("anything")
    assert len(seen) == 1


def test_search_network_error():
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = make_client(boom)
    with pytest.raises(AIServiceError):
        client.search("anything")


def test_compose_essay_sends_profile_and_cleans_reply():
    reply = "<think>outline first</think>\n I am Ana [1]—a future marine biologist. [2]\n"
    client, seen = make_client(lambda request: httpx.Response(200, json=completion_body(reply)))

    essay = client.compose_essay(make_profile(), "Describe a challenge you overcame.")

    assert essay == "I am Ana  - a future marine biologist."
    payload = json.loads(seen[0].content)
    system, user = payload["messages"]
    assert system == {"role": "system", "content": "You are a professional resume writer."}
    assert "- Name: Ana Lopez" in user["content"]
    assert "- Goal: Marine Biology" in user["content"]
    assert "- GPA: 3.9" in user["content"]
    assert "- Background: I grew up on the coast." in user["content"]
    assert "- Achievements: Beach cleanup lead" in user["content"]
    assert '"Describe a challenge you overcame."' in user["content"]


def test_compose_essay_upstream_error():
    client, seen = make_client(lambda request: httpx.Response(500, json={"error": "down"}))

    with pytest.raises(AIServiceError):
        client.compose_essay(make_profile(), "topic")
    assert len(seen) == 1


def test_compose_essay_empty_reply():
    client, _ = make_client(lambda request: httpx.Response(200, json=completion_body(None)))

    with pytest.raises(AIServiceError):
        client.compose_essay(make_profile(), "topic")


def test_compose_essay_reply_without_choices():
    client, _ = make_client(lambda request: httpx.Response(200, json={"id": "cmpl-1", "choices": []}))

    with pytest.raises(AIServiceError):
        client.compose_essay(make_profile(), "topic")


def test_build_essay_prompt_omits_missing_gpa():
    prompt = build_essay_prompt(make_profile(current_gpa=None), "Why this field?")

    assert "GPA" not in prompt
    assert "- Goal: Marine Biology\n- Background: I grew up on the coast." in prompt


def test_build_essay_prompt_includes_rules():
    prompt = build_essay_prompt(make_profile(), "Write an essay about leadership")

    assert '"Write an essay about leadership"' in prompt
    assert "Do NOT include citations" in prompt
    assert "Write in the first person" in prompt
    assert "under 350 words" in prompt
