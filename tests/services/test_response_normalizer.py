# tests/services/test_response_normalizer.py
import pytest

from english_coach.models.validation import FallbackVerdict, GraderVerdict, ParsedVerdict
from english_coach.services.response_normalizer import (
    DEFAULT_INVALID_COMMENT,
    DEFAULT_VALID_COMMENT,
    apply_default_comment,
    is_affirmative,
    parse_grader_verdict,
    strip_code_fence,
)

@pytest.mark.parametrize("text", ["yes", "YES", "  Yes \n"])
def test_is_affirmative_accepts_yes_in_any_case(text):
    assert is_affirmative(text) is True

@pytest.mark.parametrize("text", ["no", "No.", "yes.", "Yes, it does", ""])
def test_is_affirmative_rejects_everything_else(text):
    assert is_affirmative(text) is False

def test_strip_code_fence_with_language_tag():
    assert strip_code_fence('```json\n{"valid": true}\n```') == '{"valid": true}'

def test_strip_code_fence_without_language_tag():
    assert strip_code_fence('  ```\n{"valid": false}\n```  ') == '{"valid": false}'

def test_strip_code_fence_leaves_plain_text_alone():
    assert strip_code_fence('  {"valid": true}  ') == '{"valid": true}'

def test_parse_fenced_verdict_returns_fields_unchanged():
    text = '```json\n{"valid": true, "comment": "ふん、今回は認めてあげるわ。", "next_prompt": "次は5語で「cat」を使いなさい。"}\n```'
    outcome = parse_grader_verdict(text)
    assert isinstance(outcome, ParsedVerdict)
    assert outcome.verdict.valid is True
    assert outcome.verdict.comment == "ふん、今回は認めてあげるわ。"
    assert outcome.verdict.next_prompt == "次は5語で「cat」を使いなさい。"

def test_parse_verdict_treats_empty_next_prompt_as_absent():
    outcome = parse_grader_verdict('{"valid": false, "comment": "だめ", "next_prompt": ""}')
    assert isinstance(outcome, ParsedVerdict)
    assert outcome.verdict.next_prompt is None

def test_parse_verdict_ignores_unknown_keys():
    outcome = parse_grader_verdict('{"valid": true, "comment": "ok", "word_count": 3}')
    assert isinstance(outcome, ParsedVerdict)

@pytest.mark.parametrize("text", [
    "That sentence is fine, I suppose.",
    '{"comment": "missing validity"}',
    '{"valid": "yes", "comment": "string instead of bool"}',
    '[true, "list"]',
    '{"valid": true, "comment": 42}',
])
def test_parse_unusable_completion_falls_back(text):
    outcome = parse_grader_verdict(text)
    assert isinstance(outcome, FallbackVerdict)
    assert outcome.raw_text == text
    assert outcome.reason

def test_apply_default_comment_for_valid_and_invalid():
    assert apply_default_comment(GraderVerdict(valid=True)).comment == DEFAULT_VALID_COMMENT
    assert apply_default_comment(GraderVerdict(valid=False, comment=None)).comment == DEFAULT_INVALID_COMMENT

def test_apply_default_comment_keeps_existing_comment():
    verdict = GraderVerdict(valid=False, comment="「I likes」じゃなくて「I like」ですわ。")
    assert apply_default_comment(verdict) is verdict

def test_parse_too_deeply_nested_completion_falls_back():
    text = "[" * 100000 + "]" * 100000
    outcome = parse_grader_verdict(text)
    assert isinstance(outcome, FallbackVerdict)
    assert "nested too deeply" in outcome.reason
