"""
Text Cleanup - post-processing for model output shown to students.

Each step is a pure str -> str function. clean_model_output() applies them
in a fixed order:
1. drop <think>...</think> reasoning blocks
2. drop numeric citation markers like [1]
3. replace em-dashes with " - "
4. trim surrounding whitespace

Whitespace left behind by removed spans is kept as-is.
"""

import re
from typing import Callable, List

REASONING_BLOCK_RE = re.compile(r"<think>[\s\S]*?</think>")
CITATION_RE = re.compile(r"\[\d+\]")
EM_DASH = "—"


def strip_reasoning_blocks(text: str) -> str:
    return REASONING_BLOCK_RE.sub("", text)


def strip_citations(text: str) -> str:
    return CITATION_RE.sub("", text)


def normalize_em_dashes(text: str) -> str:
    return text.replace(EM_DASH, " - ")


def trim_whitespace(text: str) -> str:
    return text.strip()


CLEANUP_STEPS: List[Callable[[str], str]] = [
    strip_reasoning_blocks,
    strip_citations,
    normalize_em_dashes,
    trim_whitespace,
]


def clean_model_output(text: str) -> str:
    """Run every cleanup step over the text, in order."""
    for step in CLEANUP_STEPS:
        text = step(text)
    return text
