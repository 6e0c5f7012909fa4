# Script Engine Configuration

SCRIPT_CONFIG = {
    "MAX_TRANSCRIPT_CHARS": 12000,  # tail is dropped before prompting
    "FPS": 30,
    "BRAND": "Novig",
    "DEFAULT_CTA": "Stop leaving money on the table. Get the best odds on Novig — link in bio.",
    # Used when the production JSON after the --- separator does not parse
    "FALLBACK_FOOTAGE": ["Game highlights relevant to picks mentioned"],
    "FALLBACK_NOTES": ["Use quick cuts every 3-4s", "Add energetic background music"],
    "PICKS": {
        "DEFAULT_TARGET_SECONDS": 45,
        "MAX_PICKS": 10,
    },
}
