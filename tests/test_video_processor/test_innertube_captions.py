from unittest.mock import MagicMock, patch

import pytest
import requests

from telemetry import CaptionFetchError
from video_processor.services import fetch_player_captions

CAPTION_DOCUMENT = (
    '<timedtext format="3"><body>'
    '<p t="0" d="1500"><s>Bucks</s><s t="300"> moneyline</s><s t="600"> is</s></p>'
    '<p t="1600" d="900"><s>the</s><s t="400"> safest play tonight</s></p>'
    "</body></timedtext>"
)

PLAYER_OK = {
    "playabilityStatus": {"status": "OK"},
    "captions": {
        "playerCaptionsTracklistRenderer": {
            "captionTracks": [
                {"languageCode": "de", "baseUrl": "https://yt.example/de"},
                {"languageCode": "en", "baseUrl": "https://yt.example/en"},
            ]
        }
    },
}


def _response(status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    return response


@pytest.fixture
def mock_http():
    with patch("video_processor.services.innertube_service.requests.post") as post, patch(
        "video_processor.services.innertube_service.requests.get"
    ) as get:
        yield post, get


class TestFetchPlayerCaptions:
    def test_english_track_parsed(self, mock_http):
        post, get = mock_http
        post.return_value = _response(json_data=PLAYER_OK)
        get.return_value = _response(text=CAPTION_DOCUMENT)

        transcript = fetch_player_captions("dQw4w9WgXcQ")

        assert transcript == "Bucks moneyline is the safest play tonight"
        assert get.call_args.args[0] == "https://yt.example/en"
        body = post.call_args.kwargs["json"]
        assert body["videoId"] == "dQw4w9WgXcQ"
        assert body["context"]["client"]["clientName"] == "ANDROID"

    def test_known_caption_url_skips_player_call(self, mock_http):
        post, get = mock_http
        get.return_value = _response(text=CAPTION_DOCUMENT)

        fetch_player_captions("dQw4w9WgXcQ", caption_url="https://yt.example/direct")

        post.assert_not_called()
        assert get.call_args.args[0] == "https://yt.example/direct"

    def test_login_required_is_blocked(self, mock_http):
        post, _ = mock_http
        post.return_value = _response(
            json_data={"playabilityStatus": {"status": "LOGIN_REQUIRED", "reason": "Sign in to confirm"}}
        )

        with pytest.raises(CaptionFetchError) as exc_info:
            fetch_player_captions("dQw4w9WgXcQ")

        assert exc_info.value.category == "blocked"

    def test_no_tracks(self, mock_http):
        post, _ = mock_http
        post.return_value = _response(json_data={"playabilityStatus": {"status": "OK"}})

        with pytest.raises(CaptionFetchError) as exc_info:
            fetch_player_captions("dQw4w9WgXcQ")

        assert exc_info.value.category == "no_captions"

    def test_player_http_error(self, mock_http):
        post, _ = mock_http
        post.return_value = _response(status_code=429)

        with pytest.raises(CaptionFetchError) as exc_info:
            fetch_player_captions("dQw4w9WgXcQ")

        assert exc_info.value.category == "caption_fetch_failed"

    def test_empty_document(self, mock_http):
        post, get = mock_http
        post.return_value = _response(json_data=PLAYER_OK)
        get.return_value = _response(text="")

        with pytest.raises(CaptionFetchError) as exc_info:
            fetch_player_captions("dQw4w9WgXcQ")

        assert exc_info.value.category == "empty_captions"

    def test_transcript_too_short(self, mock_http):
        post, get = mock_http
        post.return_value = _response(json_data=PLAYER_OK)
        get.return_value = _response(text='<transcript><text start="0">ok</text></transcript>' + " " * 60)

        with pytest.raises(CaptionFetchError) as exc_info:
            fetch_player_captions("dQw4w9WgXcQ")

        assert exc_info.value.category == "transcript_too_short"

    def test_download_failure(self, mock_http):
        post, get = mock_http
        post.return_value = _response(json_data=PLAYER_OK)
        get.side_effect = requests.exceptions.ConnectionError("reset")

        with pytest.raises(CaptionFetchError) as exc_info:
            fetch_player_captions("dQw4w9WgXcQ")

        assert exc_info.value.category == "caption_fetch_failed"
