"""
Shared fixtures: an in-memory database, a PDF builder and an API client
with every dependency swapped for a test double.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from scholar_api.api.deps import (
    get_admin_pin,
    get_ai_client,
    get_profile_store,
    get_resume_extractor,
)
from scholar_api.core.errors import AIServiceError
from scholar_api.db.postgres import init_schema
from scholar_api.main import app
from scholar_api.services.profile_service import ProfileStore
from scholar_api.utils.file_upload import ResumeExtractor

TEST_PIN = "test-pin"


def build_pdf(text: str) -> bytes:
    """Build a one-page PDF that draws `text` in Helvetica."""
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    stream = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    pdf = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(pdf))
        pdf += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(pdf)
    pdf += f"xref\n0 {len(objects) + 1}\n".encode()
    pdf += b"0000000000 65535 f \n"
    for offset in offsets:
        pdf += f"{offset:010d} 00000 n \n".encode()
    pdf += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n".encode()
    pdf += f"startxref\n{xref_offset}\n%%EOF\n".encode()
    return pdf


class FakeAIClient:
    """Records calls instead of talking to Perplexity."""

    def __init__(self, essay="I am ready.", search_body=None, fail=False):
        self.essay = essay
        self.search_body = search_body or {"id": "cmpl-1", "choices": []}
        self.fail = fail
        self.search_calls = []
        self.essay_calls = []

    def search(self, query):
        self.search_calls.append(query)
        if self.fail:
            raise AIServiceError("Search failed")
        return self.search_body

    def compose_essay(self, profile, topic):
        self.essay_calls.append((profile, topic))
        if self.fail:
            raise AIServiceError("AI generation failed.")
        return self.essay


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return ProfileStore(engine)


@pytest.fixture
def fake_ai():
    return FakeAIClient()


@pytest.fixture
def client(store, fake_ai):
    app.dependency_overrides[get_profile_store] = lambda: store
    app.dependency_overrides[get_ai_client] = lambda: fake_ai
    app.dependency_overrides[get_resume_extractor] = lambda: ResumeExtractor()
    app.dependency_overrides[get_admin_pin] = lambda: TEST_PIN
    yield TestClient(app)
    app.dependency_overrides.clear()
