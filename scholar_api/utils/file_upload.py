"""
File Upload Utility - Extract text from resume PDFs.

Output is flat text (pages joined with newlines), cut to the first
MAX_RESUME_CHARS characters. No section or heading analysis.
"""

import io
import logging

from PyPDF2 import PdfReader

from scholar_api.core.errors import ResumeExtractionError

logger = logging.getLogger(__name__)

MAX_RESUME_CHARS = 10_000


class ResumeExtractor:
    """Decodes uploaded PDF bytes to plain text."""

    def __init__(self, max_chars: int = MAX_RESUME_CHARS):
        self.max_chars = max_chars

    def extract_text(self, content: bytes) -> str:
        """Extract text from PDF bytes, truncated to max_chars."""
        try:
            reader = PdfReader(io.BytesIO(content))
            text_parts = []
            for page in reader.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
        except Exception as e:
            # PyPDF2 raises a mix of PdfReadError, ValueError, KeyError... on bad input
            logger.error(f"PDF Parse Error: {e}")
            raise ResumeExtractionError("Failed to parse PDF") from e

        return '\n'.join(text_parts)[:self.max_chars]
