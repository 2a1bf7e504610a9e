import pytest

from portfolio_ai.errors import InputValidationError
from portfolio_ai.services.validator import (
    validate_chat_messages,
    validate_job_description,
    validate_request_body,
)


def _msgs(n, content="hello"):
    return [{"role": "user" if i % 2 == 0 else "assistant", "content": content} for i in range(n)]


class TestChatMessages:
    def test_accepts_exactly_fifty(self):
        result = validate_chat_messages(_msgs(50))
        assert result.ok
        assert len(result.value) == 50

    def test_rejects_fifty_one(self):
        result = validate_chat_messages(_msgs(51))
        assert not result.ok
        assert "50" in result.error

    def test_rejects_empty_list(self):
        result = validate_chat_messages([])
        assert not result.ok
        assert "empty" in result.error

    @pytest.mark.parametrize("value", [None, "hi", {"role": "user"}])
    def test_rejects_non_list(self, value):
        assert not validate_chat_messages(value).ok

    def test_content_length_boundary(self):
        assert validate_chat_messages([{"role": "user", "content": "x" * 10_000}]).ok
        result = validate_chat_messages([{"role": "user", "content": "x" * 10_001}])
        assert not result.ok
        assert "index 0" in result.error
        assert "10000" in result.error

    def test_length_is_measured_after_trim(self):
        result = validate_chat_messages([{"role": "user", "content": "  " + "x" * 10_000 + "\n"}])
        assert result.ok
        assert result.value[0].content == "x" * 10_000

    def test_rejects_bad_role_with_index(self):
        messages = _msgs(3)
        messages[2]["role"] = "system"
        result = validate_chat_messages(messages)
        assert not result.ok
        assert "index 2" in result.error
        assert "role" in result.error

    def test_rejects_whitespace_only_content(self):
        result = validate_chat_messages([{"role": "user", "content": "   "}])
        assert not result.ok
        assert "empty" in result.error

    def test_rejects_non_string_content(self):
        result = validate_chat_messages([{"role": "user", "content": 42}])
        assert not result.ok
        assert "string" in result.error

    def test_rejects_non_object_message(self):
        result = validate_chat_messages(["hello"])
        assert not result.ok
        assert "index 0" in result.error

    def test_total_length_limit(self):
        # 11 messages of 10,000 chars = 110,000 > 100,000
        result = validate_chat_messages(_msgs(11, "y" * 10_000))
        assert not result.ok
        assert "100000" in result.error
        assert validate_chat_messages(_msgs(10, "y" * 10_000)).ok

    def test_first_violation_wins(self):
        messages = [{"role": "bot", "content": "a"}, {"role": "user", "content": ""}]
        assert "index 0" in validate_chat_messages(messages).error

    def test_unwrap_raises_validation_error(self):
        with pytest.raises(InputValidationError) as exc:
            validate_chat_messages([]).unwrap()
        assert exc.value.status_code == 400
        assert exc.value.public_message == "messages must not be empty"


class TestJobDescription:
    def test_length_boundary(self):
        assert not validate_job_description("a" * 49).ok
        result = validate_job_description("a" * 50)
        assert result.ok
        assert result.value == "a" * 50

    def test_trims_before_measuring(self):
        result = validate_job_description("   " + "a" * 49 + "   ")
        assert not result.ok
        assert "min 50" in result.error

    def test_returns_trimmed_text(self):
        assert validate_job_description("\n" + "b" * 60 + "  ").value == "b" * 60

    def test_number_gets_type_error(self):
        result = validate_job_description(12345)
        assert not result.ok
        assert result.error == "Job description must be a string"

    def test_missing_gets_required_error(self):
        assert validate_job_description(None).error == "Job description is required"

    def test_upper_bound(self):
        assert not validate_job_description("a" * 50_001).ok
        assert validate_job_description("a" * 50_000).ok


def test_request_body_must_be_object():
    assert validate_request_body({"messages": []}).ok
    assert validate_request_body([1, 2]).error == "Request body must be an object"
