"""Extraction of SEO-relevant facts from a parsed document."""
from __future__ import annotations

import json
import logging

from seo_inspector.parser.document import ParsedDocument
from seo_inspector.parser.facts import (
    HeadingCounts,
    PageFacts,
    RobotsDirectives,
    SchemaParseFailure,
    SocialTags,
)

logger = logging.getLogger(__name__)

MISSING_SRC_PLACEHOLDER = "unknown image"

# Client-render heuristic. Both lists are kept short on purpose: a static page
# flagged as client-rendered gets misleading advice, a missed shell does not.
MOUNT_POINT_SELECTORS = ("#root", "#app", "[data-reactroot]", "[data-v-app]")
BUNDLER_MARKERS = ("bundle", ".chunk.", "/static/js/main.", "/assets/index-", "webpack", "@vite")

_ROBOTS_META_NAMES = ("robots", "googlebot")


def _clean_text(text: str) -> str:
    return " ".join(text.split())


def _optional(text: str | None) -> str | None:
    if text is None:
        return None
    cleaned = _clean_text(text)
    return cleaned or None


def _meta_by_name(document: ParsedDocument, name: str) -> list:
    """Return ``<meta>`` elements whose name matches case-insensitively."""
    return [
        ref for ref in document.select_all("meta[name]")
        if (document.attr(ref, "name") or "").strip().lower() == name
    ]


def _extract_title(document: ParsedDocument) -> str | None:
    titles = document.select_all("title")
    if not titles:
        return None
    return _optional(document.text(titles[0]))


def _extract_meta_description(document: ParsedDocument) -> str | None:
    for ref in _meta_by_name(document, "description"):
        content = _optional(document.attr(ref, "content"))
        if content:
            return content
    return None


def _extract_images_missing_alt(document: ParsedDocument) -> tuple[str, ...]:
    missing = []
    for ref in document.select_all("img"):
        alt = document.attr(ref, "alt")
        # An explicit role (e.g. presentation) marks the image as decorative
        if alt or document.attr(ref, "role") is not None:
            continue
        missing.append(document.attr(ref, "src") or MISSING_SRC_PLACEHOLDER)
    return tuple(missing)


def _extract_schema_blocks(document: ParsedDocument) -> tuple:
    blocks = []
    for index, ref in enumerate(document.select_all('script[type="application/ld+json"]')):
        raw = document.text(ref)
        try:
            blocks.append(json.loads(raw))
        except json.JSONDecodeError as exc:
            logger.debug("JSON-LD block %d is malformed: %s", index, exc)
            blocks.append(SchemaParseFailure(error=str(exc)))
    return tuple(blocks)


def _extract_canonical(document: ParsedDocument) -> str | None:
    for ref in document.select_all('link[rel~="canonical"]'):
        href = _optional(document.attr(ref, "href"))
        if href:
            return href
    return None


def _extract_robots(document: ParsedDocument) -> RobotsDirectives:
    noindex = False
    nofollow = False
    for name in _ROBOTS_META_NAMES:
        for ref in _meta_by_name(document, name):
            content = (document.attr(ref, "content") or "").lower()
            directives = {d.strip() for d in content.split(",")}
            if "none" in directives:
                noindex = nofollow = True
            if "noindex" in directives:
                noindex = True
            if "nofollow" in directives:
                nofollow = True
    return RobotsDirectives(noindex=noindex, nofollow=nofollow)


def _extract_social_tags(document: ParsedDocument) -> SocialTags:
    keys = set()
    for ref in document.select_all("meta"):
        for attribute in ("property", "name"):
            value = (document.attr(ref, attribute) or "").strip().lower()
            if value.startswith(("og:", "twitter:")):
                keys.add(value)

    return SocialTags(
        has_open_graph=any(k.startswith("og:") for k in keys),
        has_twitter_cards=any(k.startswith("twitter:") for k in keys),
        has_social_title=bool(keys & {"og:title", "twitter:title"}),
        has_social_image=bool(keys & {"og:image", "og:image:url", "twitter:image", "twitter:image:src"}),
    )


def _detect_client_render(document: ParsedDocument) -> bool:
    """Heuristic: is this HTML a shell that a script fills in after load?"""
    for selector in MOUNT_POINT_SELECTORS:
        if document.select_all(selector):
            logger.debug("Client-render mount point found: %s", selector)
            return True

    if not document.select_all("body > div:empty"):
        return False

    for ref in document.select_all("script[src]"):
        src = (document.attr(ref, "src") or "").lower()
        if any(marker in src for marker in BUNDLER_MARKERS):
            logger.debug("Empty container with bundled script: %s", src)
            return True
    return False


def extract_facts(document: ParsedDocument) -> PageFacts:
    """Collect the SEO facts of a parsed document.

    Args:
        document: Parsed document capability (see ``SoupDocument``)

    Returns:
        PageFacts with absent elements as None, empty tuples or zero counts
    """
    h1_texts = tuple(_clean_text(document.text(ref)) for ref in document.select_all("h1"))
    h2_texts = tuple(_clean_text(document.text(ref)) for ref in document.select_all("h2"))

    return PageFacts(
        title=_extract_title(document),
        meta_description=_extract_meta_description(document),
        heading_counts=HeadingCounts(
            h1=len(h1_texts),
            h2=len(h2_texts),
            h3=len(document.select_all("h3")),
        ),
        h1_texts=h1_texts,
        h2_texts=h2_texts,
        images_missing_alt=_extract_images_missing_alt(document),
        schema_blocks=_extract_schema_blocks(document),
        canonical_url=_extract_canonical(document),
        has_viewport=bool(_meta_by_name(document, "viewport")),
        robots_directives=_extract_robots(document),
        social_tags=_extract_social_tags(document),
        client_render_signal=_detect_client_render(document),
    )


def extract_body_text(document: ParsedDocument) -> str:
    """Return the visible text of ``<body>`` (or of the whole document)."""
    bodies = document.select_all("body")
    if bodies:
        return document.text(bodies[0])
    roots = document.select_all(":root")
    return document.text(roots[0]) if roots else ""
