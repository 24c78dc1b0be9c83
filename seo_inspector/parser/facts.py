"""Records describing the SEO-relevant facts of one document."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaParseFailure:
    """Marker for a JSON-LD block whose body is not valid JSON."""
    error: str


@dataclass(frozen=True)
class HeadingCounts:
    h1: int = 0
    h2: int = 0
    h3: int = 0


@dataclass(frozen=True)
class RobotsDirectives:
    noindex: bool = False
    nofollow: bool = False


@dataclass(frozen=True)
class SocialTags:
    """Open Graph / Twitter Card presence.

    Attributes:
        has_open_graph: Any ``og:*`` property present
        has_twitter_cards: Any ``twitter:*`` tag present
        has_social_title: ``og:title`` or ``twitter:title`` present
        has_social_image: ``og:image`` or ``twitter:image`` present
    """
    has_open_graph: bool = False
    has_twitter_cards: bool = False
    has_social_title: bool = False
    has_social_image: bool = False


def _schema_block_to_dict(block: Any) -> dict:
    if isinstance(block, SchemaParseFailure):
        return {"status": "invalid", "error": block.error}
    return {"status": "parsed", "data": block}


def _schema_block_from_dict(data: dict) -> Any:
    if data.get("status") == "invalid":
        return SchemaParseFailure(error=data.get("error", ""))
    return data.get("data")


@dataclass(frozen=True)
class PageFacts:
    """Flat record of what the fact extractor found in one document.

    Absent elements are ``None``, empty tuples or zero counts; nothing here is
    ever an exception.
    """
    title: str | None = None
    meta_description: str | None = None
    heading_counts: HeadingCounts = HeadingCounts()
    h1_texts: tuple[str, ...] = ()
    h2_texts: tuple[str, ...] = ()
    images_missing_alt: tuple[str, ...] = ()
    schema_blocks: tuple[Any, ...] = ()
    canonical_url: str | None = None
    has_viewport: bool = False
    robots_directives: RobotsDirectives = RobotsDirectives()
    social_tags: SocialTags = SocialTags()
    client_render_signal: bool = False

    @property
    def parsed_schema_blocks(self) -> list[Any]:
        return [b for b in self.schema_blocks if not isinstance(b, SchemaParseFailure)]

    @property
    def schema_failures(self) -> list[SchemaParseFailure]:
        return [b for b in self.schema_blocks if isinstance(b, SchemaParseFailure)]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = asdict(self)
        d["h1_texts"] = list(self.h1_texts)
        d["h2_texts"] = list(self.h2_texts)
        d["images_missing_alt"] = list(self.images_missing_alt)
        d["schema_blocks"] = [_schema_block_to_dict(b) for b in self.schema_blocks]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> PageFacts:
        return cls(
            title=data.get("title"),
            meta_description=data.get("meta_description"),
            heading_counts=HeadingCounts(**data.get("heading_counts", {})),
            h1_texts=tuple(data.get("h1_texts", ())),
            h2_texts=tuple(data.get("h2_texts", ())),
            images_missing_alt=tuple(data.get("images_missing_alt", ())),
            schema_blocks=tuple(_schema_block_from_dict(b) for b in data.get("schema_blocks", ())),
            canonical_url=data.get("canonical_url"),
            has_viewport=data.get("has_viewport", False),
            robots_directives=RobotsDirectives(**data.get("robots_directives", {})),
            social_tags=SocialTags(**data.get("social_tags", {})),
            client_render_signal=data.get("client_render_signal", False),
        )
