"""Keyword candidate extraction and scoring."""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import asdict, dataclass

from seo_inspector.config.settings import KeywordSettings, settings
from seo_inspector.keywords.stopwords import STOPWORDS_EN
from seo_inspector.keywords.tokenizer import clean_token, stem, stem_set

# Fixed order of placement gap labels
PLACEMENT_LABELS = ("title", "meta description", "H1", "H2")


@dataclass(frozen=True)
class KeywordCandidate:
    """A scored unigram or bigram.

    For bigrams ``normalized_form`` is the two stems joined by a space.
    """
    surface_form: str
    normalized_form: str
    score: float
    frequency: int
    density_percent: float
    in_title: bool = False
    in_meta_description: bool = False
    in_h1: bool = False
    in_h2: bool = False

    @property
    def placement_flags(self) -> tuple[bool, bool, bool, bool]:
        return (self.in_title, self.in_meta_description, self.in_h1, self.in_h2)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class KeywordAnalysis:
    """Ranked keyword candidates for one document."""
    top_words: tuple[KeywordCandidate, ...] = ()
    top_phrases: tuple[KeywordCandidate, ...] = ()
    primary_phrase: str | None = None
    placement_gaps: tuple[str, ...] = ()
    total_words: int = 0

    def to_dict(self) -> dict:
        return {
            "top_words": [c.to_dict() for c in self.top_words],
            "top_phrases": [c.to_dict() for c in self.top_phrases],
            "primary_phrase": self.primary_phrase,
            "placement_gaps": list(self.placement_gaps),
            "total_words": self.total_words,
        }

    @classmethod
    def from_dict(cls, data: dict) -> KeywordAnalysis:
        return cls(
            top_words=tuple(KeywordCandidate(**c) for c in data.get("top_words", ())),
            top_phrases=tuple(KeywordCandidate(**c) for c in data.get("top_phrases", ())),
            primary_phrase=data.get("primary_phrase"),
            placement_gaps=tuple(data.get("placement_gaps", ())),
            total_words=data.get("total_words", 0),
        )


def _density(count: int, denominator: int) -> float:
    if denominator <= 0:
        return 0.0
    return round(100 * count / denominator, 2)


def _contains_all(text: str | None, words: Sequence[str]) -> bool:
    """Every word appears somewhere in ``text`` (substring, case-insensitive).

    Word order and contiguity are not checked.
    """
    if not text:
        return False
    lowered = text.lower()
    return all(word in lowered for word in words)


def _count_words(tokens: list[str], config: KeywordSettings) -> tuple[Counter, dict[str, str]]:
    """Count stems and pick the most frequent surface form per stem."""
    counts: Counter = Counter()
    surfaces: dict[str, Counter] = {}
    for token in tokens:
        if len(token) < config.min_word_length or token in STOPWORDS_EN:
            continue
        key = stem(token, config.min_stem_length)
        counts[key] += 1
        surfaces.setdefault(key, Counter())[token] += 1

    # Counter.most_common keeps first-seen order among equal counts
    best_surface = {key: forms.most_common(1)[0][0] for key, forms in surfaces.items()}
    return counts, best_surface


def _count_phrases(raw_tokens: list[str], config: KeywordSettings) -> tuple[Counter, dict[str, str]]:
    counts: Counter = Counter()
    first_surface: dict[str, str] = {}
    cleaned = [clean_token(t) for t in raw_tokens]
    for first, second in zip(cleaned, cleaned[1:]):
        if len(first) < config.min_phrase_word_length or len(second) < config.min_phrase_word_length:
            continue
        if first in STOPWORDS_EN or second in STOPWORDS_EN:
            continue
        key = f"{stem(first, config.min_stem_length)} {stem(second, config.min_stem_length)}"
        counts[key] += 1
        first_surface.setdefault(key, f"{first} {second}")
    return counts, first_surface


def _top(candidates: list[KeywordCandidate], limit: int) -> tuple[KeywordCandidate, ...]:
    # sorted() is stable, so equal scores keep insertion (first-seen) order
    return tuple(sorted(candidates, key=lambda c: -c.score)[:limit])


def score_keywords(
    body_text: str | None,
    title: str | None = None,
    meta_description: str | None = None,
    h1_texts: Sequence[str] = (),
    h2_texts: Sequence[str] = (),
    config: KeywordSettings | None = None,
) -> KeywordAnalysis:
    """Rank likely target keywords of a page.

    Args:
        body_text: Visible body text
        title: Page title (empty string behaves as absent)
        meta_description: Meta description content
        h1_texts: Text of every H1
        h2_texts: Text of every H2
        config: Keyword settings; defaults to the global settings

    Returns:
        KeywordAnalysis with at most ``top_n`` words and phrases
    """
    config = config if config is not None else settings.keywords
    raw_tokens = (body_text or "").split()
    tokens = [t for t in (clean_token(raw) for raw in raw_tokens) if t]
    total_words = len(tokens)

    if not tokens:
        return KeywordAnalysis()

    title_stems = stem_set(title, config.min_stem_length)
    meta_stems = stem_set(meta_description, config.min_stem_length)
    h1_stems = set().union(*(stem_set(t, config.min_stem_length) for t in h1_texts))
    h2_stems = set().union(*(stem_set(t, config.min_stem_length) for t in h2_texts))

    word_counts, word_surfaces = _count_words(tokens, config)
    words = []
    for key, count in word_counts.items():
        in_title = key in title_stems
        in_meta = key in meta_stems
        in_h1 = key in h1_stems
        in_h2 = key in h2_stems

        score = count
        if in_title:
            score += config.title_boost
        if in_meta:
            score += config.meta_description_boost
        if in_h1:
            score += config.h1_boost
        if in_h2:
            score += config.h2_boost

        words.append(KeywordCandidate(
            surface_form=word_surfaces[key],
            normalized_form=key,
            score=score,
            frequency=count,
            density_percent=_density(count, total_words),
            in_title=in_title,
            in_meta_description=in_meta,
            in_h1=in_h1,
            in_h2=in_h2,
        ))

    phrase_counts, phrase_surfaces = _count_phrases(raw_tokens, config)
    phrases = []
    for key, count in phrase_counts.items():
        surface = phrase_surfaces[key]
        parts = surface.split(" ")
        in_title = _contains_all(title, parts)
        in_meta = _contains_all(meta_description, parts)
        in_h1 = any(_contains_all(text, parts) for text in h1_texts)
        in_h2 = any(_contains_all(text, parts) for text in h2_texts)

        score = count * config.phrase_multiplier
        if in_title:
            score += config.phrase_title_boost
        if in_meta:
            score += config.phrase_meta_description_boost
        if in_h1:
            score += config.phrase_h1_boost
        if in_h2:
            score += config.phrase_h2_boost

        phrases.append(KeywordCandidate(
            surface_form=surface,
            normalized_form=key,
            score=score,
            frequency=count,
            density_percent=_density(count, total_words - 1),
            in_title=in_title,
            in_meta_description=in_meta,
            in_h1=in_h1,
            in_h2=in_h2,
        ))

    top_words = _top(words, config.top_n)
    top_phrases = _top(phrases, config.top_n)

    primary_phrase = None
    placement_gaps: tuple[str, ...] = ()
    if top_phrases:
        primary = top_phrases[0]
        primary_phrase = primary.surface_form
        placement_gaps = tuple(
            label for label, present in zip(PLACEMENT_LABELS, primary.placement_flags)
            if not present
        )

    return KeywordAnalysis(
        top_words=top_words,
        top_phrases=top_phrases,
        primary_phrase=primary_phrase,
        placement_gaps=placement_gaps,
        total_words=total_words,
    )
