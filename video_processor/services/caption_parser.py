"""
Caption XML parsing.

YouTube serves two caption document shapes:
- manual captions: ``<text start=".." dur="..">segment</text>``
- auto-generated (ASR): ``<p t=".." d=".."><s>word</s><s> word</s></p>``

The documents are matched with regular expressions rather than an XML parser
because proxies sometimes return fragments that are not well-formed.
"""

import re

TEXT_SEGMENT = re.compile(r"<text[^>]*>(.*?)</text>", re.DOTALL)
ASR_GROUP = re.compile(r"<p [^>]*>([\s\S]*?)</p>", re.DOTALL)
ASR_WORD = re.compile(r"<s[^>]*>(.*?)</s>", re.DOTALL)
LINE_BREAK = re.compile(r"\r?\n")

ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&#39;", "'"),
    ("&quot;", '"'),
)


def decode_entities(text: str) -> str:
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def _clean(segment: str) -> str:
    return LINE_BREAK.sub(" ", decode_entities(segment))


def parse_caption_xml(xml: str) -> str:
    """
    Extract plain transcript text from a caption document.

    Manual format wins when it yields more than 10 characters; otherwise the
    ASR format is tried. Returns "" when neither yields anything.
    """
    if not xml:
        return ""

    segments = TEXT_SEGMENT.findall(xml)
    if segments:
        transcript = " ".join(_clean(s) for s in segments).strip()
        if len(transcript) > 10:
            return transcript

    words = []
    for group in ASR_GROUP.findall(xml):
        for word in ASR_WORD.findall(group):
            word = _clean(word).strip()
            if word:
                words.append(word)

    return " ".join(words).strip()
