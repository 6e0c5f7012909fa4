"""
Hook catalog.

Templates carry ``{day}``, ``{sport}`` and ``{count}`` placeholders that are
filled from a picks request.
"""

import random
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

HookTone = Literal["hype", "controversial", "confident", "casual", "authoritative"]
HookFormat = Literal["statement", "question", "declaration"]

HOOK_TONES = ("hype", "controversial", "confident", "casual", "authoritative")


class Hook(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    tone: HookTone
    format: HookFormat
    tags: List[str]


HOOKS: List[Hook] = [
    # Hype
    Hook(
        id="official-best",
        text="It's official: {sport} {day} has the best {count} picks of the season",
        tone="hype", format="declaration", tags=["nba", "official", "season"],
    ),
    Hook(
        id="ready",
        text="You ready? Because {sport} {day} just handed us {count} of the cleanest spots of the year",
        tone="hype", format="question", tags=["nba", "hype", "clean"],
    ),
    Hook(
        id="what-if-told-you",
        text="What if I told you {sport} {day} has {count} picks with almost zero variance?",
        tone="hype", format="question", tags=["nba", "variance"],
    ),
    # Controversial
    Hook(
        id="controversial-sweep",
        text="This may be controversial: but {sport} {day} is the EASIEST path to a {count}-0 sweep with these {count} picks",
        tone="controversial", format="statement", tags=["nba", "sweep", "easy"],
    ),
    Hook(
        id="controversial-sweat-free",
        text="This may be controversial: but these {count} picks for the {sport} on {day} are sweat free",
        tone="controversial", format="statement", tags=["nba", "sweat-free", "easy"],
    ),
    Hook(
        id="controversial-primetime",
        text="This may be controversial: but this {sport} primetime game tonight is WAY too easy to predict",
        tone="controversial", format="statement", tags=["nba", "primetime", "easy"],
    ),
    # Confident
    Hook(
        id="marry-picks",
        text="I might marry these {count} picks for the {sport} on {day}",
        tone="confident", format="statement", tags=["nba", "marriage", "confident"],
    ),
    Hook(
        id="lock-of-week",
        text="I don't say this lightly, this {sport} {day} card might be the lock of the week",
        tone="confident", format="statement", tags=["nba", "lock"],
    ),
    Hook(
        id="seen-enough",
        text="I've seen enough. {sport} {day} is a {count}-leg parlay special and it's not close",
        tone="confident", format="declaration", tags=["nba", "parlay"],
    ),
    # Authoritative
    Hook(
        id="not-missing",
        text="If you miss these {count} {sport} picks on {day}, that's on you",
        tone="authoritative", format="statement", tags=["nba", "urgent"],
    ),
    Hook(
        id="numbers-dont-lie",
        text="The numbers don't lie: {sport} on {day} is setting up the cleanest {count}-pick slate we've seen all month",
        tone="authoritative", format="statement", tags=["nba", "data", "analytical"],
    ),
    # Casual
    Hook(
        id="be-honest",
        text="Be honest, you already knew {sport} {day} was going to go this way",
        tone="casual", format="statement", tags=["nba", "relatable"],
    ),
    Hook(
        id="not-gonna-lie",
        text="Not gonna lie, these {count} {sport} picks for {day} basically printed themselves",
        tone="casual", format="statement", tags=["nba", "easy"],
    ),
    Hook(
        id="woke-up-chose",
        text="Woke up, chose violence, and these {count} {sport} picks on {day} are the proof",
        tone="casual", format="statement", tags=["nba", "meme", "energy"],
    ),
]


def fill_hook(hook: Hook, day: str, sport: str, count: int) -> str:
    return (
        hook.text.replace("{day}", day)
        .replace("{sport}", sport)
        .replace("{count}", str(count))
    )


def get_hooks_by_tone(tone: str) -> List[Hook]:
    return [hook for hook in HOOKS if hook.tone == tone]


def get_hook(hook_id: str) -> Optional[Hook]:
    return next((hook for hook in HOOKS if hook.id == hook_id), None)


def get_random_hook(
    tone: Optional[str] = None,
    format: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Hook:
    """Pick a random template; filters that match nothing fall back to the whole catalog"""
    pool = list(HOOKS)
    if tone:
        pool = [hook for hook in pool if hook.tone == tone]
    if format:
        pool = [hook for hook in pool if hook.format == format]
    if not pool:
        pool = list(HOOKS)
    return (rng or random).choice(pool)
