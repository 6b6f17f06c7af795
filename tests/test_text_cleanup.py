from scholar_api.services.text_cleanup import (
    CLEANUP_STEPS,
    clean_model_output,
    normalize_em_dashes,
    strip_citations,
    strip_reasoning_blocks,
    trim_whitespace,
)


def test_strip_reasoning_blocks_removes_markers_and_content():
    assert strip_reasoning_blocks("<think>plan it</think>Answer") == "Answer"


def test_strip_reasoning_blocks_spans_newlines_and_is_non_greedy():
    text = "<think>a\nb</think>keep<think>c</think> this"
    assert strip_reasoning_blocks(text) == "keep this"


def test_strip_reasoning_blocks_leaves_unpaired_marker():
    assert strip_reasoning_blocks("<think>never closed") == "<think>never closed"


def test_strip_citations_removes_numeric_markers_only():
    assert strip_citations("Grant [1][23] and [a] note") == "Grant  and [a] note"


def test_normalize_em_dashes():
    assert normalize_em_dashes("one—two—three") == "one - two - three"


def test_normalize_em_dashes_leaves_hyphens_and_en_dashes():
    assert normalize_em_dashes("well-known 2020–2024") == "well-known 2020–2024"


def test_trim_whitespace():
    assert trim_whitespace("\n  text \t") == "text"


def test_steps_run_in_fixed_order():
    assert CLEANUP_STEPS == [
        strip_reasoning_blocks,
        strip_citations,
        normalize_em_dashes,
        trim_whitespace,
    ]


def test_clean_model_output_example():
    assert clean_model_output("<think>ignore</think>Hello [1] world—now") == "Hello  world - now"


def test_clean_model_output_keeps_clean_text():
    text = "I am a first-generation student studying biology."
    assert clean_model_output(text) == text
    assert clean_model_output(f"  {text}\n") == text


def test_clean_model_output_is_idempotent():
    once = clean_model_output("<think>x</think> Dear committee [2] — thanks ")
    assert clean_model_output(once) == once
