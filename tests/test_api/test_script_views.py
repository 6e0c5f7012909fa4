"""
Tests for the script generation endpoint.
Transcript acquisition and the model call are mocked through the service
container.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

from django.test import Client, SimpleTestCase

from ai_utils.config import AIConfig
from ai_utils.models import ChatCompletion, ChatUsage
from script_engine.generator import ScriptGenerator
from script_engine.models import ScriptSettings
from telemetry import (
    ManualTranscriptRequiredError,
    TranscriptUnavailableError,
    UpstreamBlockedError,
)
from video_processor.types import Platform, TranscriptResult, VideoMeta

COMPLETION_TEXT = """[HOOK]
Stop scrolling.

[BODY]
Lakers minus four is free money tonight.

[CTA]
Bet now on the link.
---
{"footage": ["Lakers b-roll"], "notes": ["Fast cuts"], "hookAlts": []}"""

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def _generated_script():
    completion = ChatCompletion(
        text=COMPLETION_TEXT,
        model="anthropic/claude-sonnet-4",
        usage=ChatUsage(prompt_tokens=1000, completion_tokens=500),
    )
    return ScriptGenerator(llm_provider=MagicMock(), config=AIConfig()).assemble(
        completion, ScriptSettings()
    )


def _transcript_result():
    return TranscriptResult(
        transcript="Lakers minus four is free money tonight, trust me.",
        meta=VideoMeta(
            video_id="dQw4w9WgXcQ",
            title="Lakers Preview",
            channel="Sharp Picks",
            platform=Platform.YOUTUBE,
        ),
    )


class GenerateScriptViewTest(SimpleTestCase):
    """Test cases for POST /api/generate/"""

    def setUp(self):
        self.client = Client()
        self.url = "/api/generate/"

        self.transcript_chain = MagicMock()
        self.transcript_chain.fetch = AsyncMock(return_value=_transcript_result())
        self.script_generator = MagicMock()
        self.script_generator.generate = AsyncMock(return_value=_generated_script())

        services = {
            "transcript_chain": self.transcript_chain,
            "script_generator": self.script_generator,
        }
        container = MagicMock()
        container.get_service.side_effect = services.__getitem__

        container_patcher = patch(
            "api.views.script_views.get_service_container", return_value=container
        )
        configured_patcher = patch("api.views.script_views.ensure_script_model_configured")
        container_patcher.start()
        configured_patcher.start()
        self.addCleanup(container_patcher.stop)
        self.addCleanup(configured_patcher.stop)

    def _post(self, payload):
        return self.client.post(self.url, data=json.dumps(payload), content_type="application/json")

    def test_success(self):
        response = self._post({"url": VIDEO_URL, "settings": {"targetSeconds": 60, "style": "analytical"}})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["videoTitle"], "Lakers Preview")
        self.assertEqual(data["channel"], "Sharp Picks")
        self.assertEqual(data["videoId"], "dQw4w9WgXcQ")
        self.assertEqual(data["platform"], "youtube")
        self.assertEqual(data["sections"]["hook"], "Stop scrolling.")
        self.assertEqual(data["hookSeconds"], 1)
        self.assertEqual(data["backgroundFootage"], ["Lakers b-roll"])
        self.assertEqual(data["timeline"]["totalDurationSec"], 6)
        self.assertEqual(data["usage"][0]["totalTokens"], 1500)

        self.transcript_chain.fetch.assert_awaited_once_with(VIDEO_URL, None)
        settings = self.script_generator.generate.call_args.args[3]
        self.assertEqual(settings.target_seconds, 60)

    def test_manual_transcript_is_forwarded(self):
        response = self._post({"manualTranscript": "My pasted transcript text"})

        self.assertEqual(response.status_code, 200)
        self.transcript_chain.fetch.assert_awaited_once_with(None, "My pasted transcript text")

    def test_missing_url_and_transcript(self):
        response = self._post({"settings": {"targetSeconds": 45}})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Provide a video URL or paste a transcript")
        self.transcript_chain.fetch.assert_not_called()

    def test_blank_inputs_count_as_missing(self):
        response = self._post({"url": "   ", "manualTranscript": ""})

        self.assertEqual(response.status_code, 400)

    def test_invalid_json(self):
        response = self.client.post(self.url, data="{not json", content_type="application/json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Invalid JSON format")

    def test_invalid_target_length(self):
        response = self._post({"url": VIDEO_URL, "settings": {"targetSeconds": 20}})

        self.assertEqual(response.status_code, 400)
        self.assertIn("30, 45, 60 or 90", response.json()["error"])

    def test_get_not_allowed(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 405)

    def test_transcript_unavailable(self):
        self.transcript_chain.fetch.side_effect = TranscriptUnavailableError(
            "Transcript is disabled for this video. Paste the transcript manually in the box below.",
            video_id="dQw4w9WgXcQ",
            last_error="native_captions: error (captions_disabled)",
        )

        response = self._post({"url": VIDEO_URL})

        self.assertEqual(response.status_code, 422)
        data = response.json()
        self.assertEqual(data["code"], "TRANSCRIPT_UNAVAILABLE")
        self.assertTrue(data["error"].startswith("Transcript is disabled"))
        self.assertEqual(data["debug"], "native_captions: error (captions_disabled)")
        self.script_generator.generate.assert_not_called()

    def test_instagram_without_transcript(self):
        self.transcript_chain.fetch.side_effect = ManualTranscriptRequiredError(
            "Instagram videos require a manual transcript. Paste what they say in the box below."
        )

        response = self._post({"url": "https://www.instagram.com/reel/C8abc123/"})

        self.assertEqual(response.status_code, 422)
        self.assertNotIn("debug", response.json())

    def test_upstream_blocked(self):
        self.transcript_chain.fetch.side_effect = UpstreamBlockedError(
            "YouTube blocked automated access to this video. Paste the transcript manually."
        )

        response = self._post({"url": VIDEO_URL})

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["code"], "UPSTREAM_BLOCKED")

    def test_unexpected_failure(self):
        self.script_generator.generate.side_effect = RuntimeError("model exploded")

        response = self._post({"url": VIDEO_URL})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "model exploded")


class GenerateScriptConfigurationTest(SimpleTestCase):
    """The credential check runs before any acquisition"""

    def test_missing_model_key(self):
        container = MagicMock()
        with patch("script_engine.generator.get_config", return_value=AIConfig()), patch(
            "api.views.script_views.get_service_container", return_value=container
        ):
            response = Client().post(
                "/api/generate/",
                data=json.dumps({"url": VIDEO_URL}),
                content_type="application/json",
            )

        self.assertEqual(response.status_code, 500)
        data = response.json()
        self.assertEqual(data["code"], "CONFIGURATION_ERROR")
        self.assertEqual(data["error"], "OPENROUTER_API_KEY not configured")
        container.get_service.assert_not_called()
