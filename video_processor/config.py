# Transcript Acquisition Configuration

TRANSCRIPT_CONFIG = {
    # Source order is fixed: native captions -> AI video transcription -> caption proxies
    "SOURCES": {
        "native_captions": True,
        "ai_transcription": True,
        "caption_proxy": True,
    },
    "TIMEOUTS": {
        "native_captions": 15,  # youtube-transcript-api, runs in a worker thread
        "ai_transcription": 50,  # Gemini watches the whole video
        "caption_proxy_manifest": 6,  # per instance
        "caption_proxy_document": 5,  # per instance
        "caption_proxy_instance": 11,  # wall-clock cap on manifest plus document
        "caption_proxy_total": 50,  # whole instance walk
        "metadata": 5,  # oEmbed, best effort
        "innertube_player": 10,
        "innertube_document": 10,
    },
    "LANGUAGE": "en",
    "INVIDIOUS_INSTANCES": [
        "https://inv.nadeko.net",
        "https://iv.ggtyler.dev",
        "https://invidious.nerdvpn.de",
        "https://invidious.lunar.icu",
    ],
    "MIN_TRANSCRIPT_CHARS": 10,  # accepted transcripts are strictly longer
    "MIN_CAPTION_DOCUMENT_CHARS": 50,  # shorter caption documents are skipped
    "AI_TRANSCRIPTION_PROMPT": (
        "Transcribe the spoken words in this video verbatim in English. "
        "Output ONLY the transcript text. No timestamps, labels, or commentary."
    ),
    "OEMBED_URL": "https://www.youtube.com/oembed",
    "INNERTUBE_PLAYER_URL": "https://www.youtube.com/youtubei/v1/player?prettyPrint=false",
    "INNERTUBE_CLIENT": {
        "clientName": "ANDROID",
        "clientVersion": "19.09.37",
        "hl": "en",
        "gl": "US",
        "androidSdkVersion": 30,
    },
    "USER_AGENT": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
}

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_CHANNEL = "Unknown Channel"
