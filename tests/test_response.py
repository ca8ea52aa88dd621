"""In-band error detection and result validation."""

import httpx
import pytest

from psn import APIError, CompareTrophiesResponse, Profile, ResponseValidationError
from psn.api.response import Failure, Success, decode_payload, discriminate, interpret, unwrap


def _response(content: bytes, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=content,
        request=httpx.Request("GET", "https://us-prof.np.community.playstation.net/"),
    )


class TestDecodePayload:
    def test_should_return_none_for_empty_body(self):
        assert decode_payload(_response(b"", status_code=204)) is None

    def test_should_return_none_for_non_json_body(self):
        assert decode_payload(_response(b"<html>")) is None

    def test_should_decode_json_body(self):
        assert decode_payload(_response(b'{"a": 1}')) == {"a": 1}


class TestInterpret:
    @pytest.mark.parametrize("result_type", [None, Profile, CompareTrophiesResponse])
    def test_should_fail_on_error_object_for_any_result_type(self, result_type):
        result = interpret({"error": {"message": "nope"}}, result_type)

        assert isinstance(result, Failure)
        assert result.message == "nope"

    def test_should_keep_raw_error_in_details(self):
        error = {"code": 2105356, "message": "User not found"}

        result = interpret({"error": error}, Profile, root="profile")

        assert result.details == {"error": error}

    def test_should_fail_on_error_key_without_object(self):
        assert discriminate({"error": "invalid_token"}) == Failure(
            message="invalid_token", details={"error": "invalid_token"}
        )

    def test_should_select_profile_root(self):
        result = interpret({"profile": {"onlineId": "x"}}, Profile, root="profile")

        assert isinstance(result, Success)
        assert result.value.online_id == "x"

    def test_should_reject_payload_missing_root(self):
        with pytest.raises(ResponseValidationError):
            interpret({"onlineId": "x"}, Profile, root="profile")

    def test_should_reject_invalid_result_payload(self):
        with pytest.raises(ResponseValidationError) as exc_info:
            interpret({"trophyTitles": "not a list"}, CompareTrophiesResponse)

        assert exc_info.value.details["errors"]

    @pytest.mark.parametrize("payload", [None, {}, {"anything": True}, [1, 2]])
    def test_should_succeed_without_result_type_when_no_error(self, payload):
        assert interpret(payload) == Success(True)

    def test_should_read_misspelled_platform_key(self):
        payload = {
            "totalResults": 1,
            "offset": 0,
            "limit": 36,
            "trophyTitles": [{
                "npCommunicationId": "NPWR00001_00",
                "trophyTitleName": "Some Game",
                "trophyTitlePlatfrom": "PS4",
                "comparedUser": {"onlineId": "target", "progress": 55},
            }],
        }

        result = interpret(payload, CompareTrophiesResponse)

        title = result.value.trophy_titles[0]
        assert title.trophy_title_platform == "PS4"
        assert title.compared_user.progress == 55


class TestUnwrap:
    def test_should_raise_api_error_with_message_and_status(self):
        with pytest.raises(APIError) as exc_info:
            unwrap(Failure(message="nope"), status_code=403)

        assert exc_info.value.message == "nope"
        assert str(exc_info.value) == "nope"
        assert exc_info.value.details["status_code"] == 403

    def test_should_return_success_value(self):
        assert unwrap(Success(42)) == 42
