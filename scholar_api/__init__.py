"""
Scholarship Assistant API
A thin backend for scholarship search, student profiles and AI-written personal statements.

Architecture:
- PostgreSQL: Student profiles (upsert keyed by email)
- Perplexity AI: Scholarship search and personal statement drafting
- PyPDF2: Resume text extraction
"""

__version__ = "1.0.0"
