"""
Perplexity API Client

Perplexity exposes an OpenAI-compatible chat-completions API, so we use the
openai library pointed at Perplexity's base URL.

- search():        forwards a scholarship query, returns the upstream JSON untouched
- compose_essay(): drafts a first-person personal statement from a stored profile

Each call is a single attempt: SDK retries are disabled and any failure is
raised as AIServiceError.
"""

import logging
from typing import Optional

import httpx
from openai import OpenAI, OpenAIError

from scholar_api.core.config import get_settings
from scholar_api.core.errors import AIServiceError
from scholar_api.prompts import (
    ESSAY_PROMPT_TEMPLATE,
    ESSAY_SYSTEM_PROMPT,
    GPA_LINE_TEMPLATE,
    SEARCH_SYSTEM_PROMPT,
    SEARCH_USER_TEMPLATE,
)
from scholar_api.schemas.schemas import StudentProfile
from scholar_api.services.text_cleanup import clean_model_output

logger = logging.getLogger(__name__)


def build_essay_prompt(profile: StudentProfile, topic: str) -> str:
    """Fill the personal statement template. The GPA line is left out when no GPA is stored."""
    gpa_line = GPA_LINE_TEMPLATE.format(current_gpa=profile.current_gpa) if profile.current_gpa else ""
    return ESSAY_PROMPT_TEMPLATE.format(
        full_name=profile.full_name,
        major_of_interest=profile.major_of_interest,
        gpa_line=gpa_line,
        personal_statement=profile.personal_statement,
        extracurriculars=profile.extracurriculars,
        topic=topic,
    )


class PerplexityClient:
    """
    Wrapper for the Perplexity chat-completions API.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.perplexity.ai",
        model: str = "sonar",
        http_client: Optional[httpx.Client] = None
    ):
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client
        )
        self.model = model

    def _messages(self, system_prompt: str, user_content: str) -> list:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_content}
        ]

    def search(self, query: str) -> dict:
        """
        Ask the search model for scholarships matching the query.
        Returns the upstream response body exactly as received.
        """
        logger.info(f"Searching for: {query}")
        try:
            raw = self.client.chat.completions.with_raw_response.create(
                model=self.model,
                messages=self._messages(SEARCH_SYSTEM_PROMPT, SEARCH_USER_TEMPLATE.format(query=query))
            )
            return raw.http_response.json()
        except (OpenAIError, ValueError) as e:
            logger.error(f"Search Error: {e}")
            raise AIServiceError("Search failed") from e

    def compose_essay(self, profile: StudentProfile, topic: str) -> str:
        """
        Draft a personal statement for the given application topic.
        Returns the cleaned text.
        """
        logger.info(f"Processing text for: {profile.email}")
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self._messages(ESSAY_SYSTEM_PROMPT, build_essay_prompt(profile, topic))
            )
        except OpenAIError as e:
            logger.error(f"AI Error: {e}")
            raise AIServiceError("AI generation failed.") from e

        try:
            raw_text = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"AI Error: malformed reply: {e}")
            raise AIServiceError("AI generation failed.") from e

        if not isinstance(raw_text, str) or not raw_text:
            logger.error("AI Error: reply contained no text")
            raise AIServiceError("AI generation failed.")

        return clean_model_output(raw_text)

    def test_connection(self) -> bool:
        """Test if the Perplexity API is reachable"""
        try:
            self.client.chat.completions.create(
                model=self.model,
                messages=self._messages("You are a test assistant.", "Reply with exactly: OK"),
                max_tokens=10
            )
            return True
        except OpenAIError as e:
            logger.error(f"Perplexity connection failed: {e}")
            return False


def create_perplexity_client() -> PerplexityClient:
    """Build a client from the environment settings."""
    settings = get_settings()
    return PerplexityClient(
        api_key=settings.perplexity_api_key,
        base_url=settings.perplexity_base_url,
        model=settings.perplexity_model
    )
