"""
Gemini Video Transcription Provider
Uses the native Gemini API, which actually fetches and watches a public
YouTube URL passed as file data. OpenAI-compatible proxies only forward text,
so this provider talks to Google directly.
"""

from google import genai
from google.genai import types

from telemetry import get_logger, handle_api_errors

from ..config import AIConfig
from ..interfaces.llm import VideoTranscriptionProvider

logger = get_logger(__name__)


class GeminiVideoTranscriber(VideoTranscriptionProvider):
    """Transcribes a public video URL with a Gemini model"""

    def __init__(self, config: AIConfig):
        self.config = config
        self.client = genai.Client(api_key=config.gemini.api_key)
        self.model = config.gemini.transcription_model
        self.generation_config = types.GenerateContentConfig(
            temperature=config.gemini.temperature,
            max_output_tokens=config.gemini.max_output_tokens,
        )

        logger.info(f"Initialized Gemini transcriber with model: {self.model}")

    async def transcribe_video(self, prompt: str, video_url: str) -> str:
        contents = types.Content(
            role="user",
            parts=[
                types.Part(text=prompt),
                types.Part(
                    file_data=types.FileData(file_uri=video_url, mime_type="video/*")
                ),
            ],
        )

        with handle_api_errors("Gemini"):
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=self.generation_config,
            )

        return (response.text or "").strip()
