from orchestrator.response_parser import (
    extract_text,
    find_balanced_object,
    parse_json_payload,
)


def test_output_text_has_priority():
    payload = {
        "output_text": "from output_text",
        "output": [{"content": [{"text": "from output"}]}],
        "choices": [{"message": {"content": "from choices"}}],
    }
    assert extract_text(payload) == "from output_text"


def test_output_content_skips_empty_items():
    payload = {
        "output_text": "",
        "output": [
            {"type": "reasoning", "summary": []},
            {"type": "message", "content": [{"type": "output_text", "text": "  "}, {"text": "found"}]},
        ],
    }
    assert extract_text(payload) == "found"


def test_chat_completion_shape():
    assert extract_text({"choices": [{"message": {"content": "chat"}}]}) == "chat"


def test_legacy_completion_shape():
    assert extract_text({"choices": [{"text": "legacy"}]}) == "legacy"


def test_unknown_shape_yields_empty_text():
    assert extract_text({"data": {"text": "nope"}}) == ""
    assert extract_text({"choices": "garbage", "output": "garbage"}) == ""


def test_strict_parse():
    result = parse_json_payload('{"ok": true, "programs": []}')
    assert result.ok is True
    assert result.stage == "strict"
    assert result.value == {"ok": True, "programs": []}


def test_brace_recovery_from_markdown_fence():
    text = 'Here you go:\n```json\n{"programs": [{"name": "A {x}"}], "notes": "n"}\n```\nThanks!'
    result = parse_json_payload(text)
    assert result.ok is True
    assert result.stage == "brace"
    assert result.value["programs"][0]["name"] == "A {x}"


def test_no_braces_is_unparseable():
    result = parse_json_payload("Sorry, I could not find any programs.")
    assert result.ok is False
    assert result.value is None


def test_broken_brace_substring_is_unparseable():
    assert parse_json_payload("prefix {not: json} suffix").ok is False
    assert parse_json_payload("{ unterminated").ok is False
    assert parse_json_payload("").ok is False


def test_balanced_object_ignores_braces_in_strings():
    text = 'x {"a": "}", "b": {"c": "\\"{"}} y'
    assert find_balanced_object(text) == '{"a": "}", "b": {"c": "\\"{"}}'
