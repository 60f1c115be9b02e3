import json

import pytest

from careerforge.services.ai_text import parse_json_response, strip_code_fences

PAYLOAD = {"questions": [{"question": "Q?", "options": ["a", "b"], "correctAnswer": "a"}]}


def test_fenced_json_parses_like_plain_json():
    raw = json.dumps(PAYLOAD)
    fenced = f"```json\n{raw}\n```"
    assert parse_json_response(fenced) == parse_json_response(raw) == PAYLOAD


def test_untagged_and_uppercase_fences():
    raw = json.dumps(PAYLOAD)
    assert parse_json_response(f"```\n{raw}\n```") == PAYLOAD
    assert parse_json_response(f"  ```JSON\n{raw}```  \n") == PAYLOAD


def test_plain_text_is_only_trimmed():
    assert strip_code_fences("  Keep practicing SQL joins.\n") == "Keep practicing SQL joins."


def test_inner_backticks_are_kept():
    text = "```json\n{\"code\": \"use ``` to fence\"}\n```"
    assert parse_json_response(text) == {"code": "use ``` to fence"}


def test_malformed_json_raises_value_error():
    with pytest.raises(ValueError):
        parse_json_response("```json\n{\"growthRate\": 8,,}\n```")


def test_empty_reply_raises():
    with pytest.raises(ValueError):
        parse_json_response(None)
