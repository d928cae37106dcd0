"""
Auto-linking service for rendered wiki content.

This service handles:
- Building the table of linkable entities (published entrepreneurs, sectors,
  countries, glossary terms)
- Caching that table and invalidating it when the underlying rows change
- Wrapping known entity names found in rendered HTML in internal links
"""
import logging
import re
from collections import Counter
from dataclasses import dataclass

from django.conf import settings
from django.core.cache import cache
from django.utils.html import escape

from wiki.constants import (
    CACHE_TIMEOUT_ENTITIES,
    CSS_CLASS_AUTOLINK,
    ENTITY_TYPE_COUNTRY,
    ENTITY_TYPE_ENTREPRENEUR,
    ENTITY_TYPE_SECTOR,
    ENTITY_TYPE_TERM,
    ENTITY_URL_PREFIXES,
    LINKABLE_ENTITIES_CACHE_KEY,
    STATIC_COUNTRY_ENTITIES,
    STATIC_SECTOR_ENTITIES,
    STATIC_TERM_ENTITIES,
)

logger = logging.getLogger(__name__)

# Splits HTML into alternating text / tag parts (tags at odd indexes).
# Quoted attribute values may contain ">".
TAG_SPLIT_PATTERN = re.compile(r'''(<(?:[^<>"']|"[^"]*"|'[^']*')*>)''')
ANCHOR_OPEN_PATTERN = re.compile(r'<a\b', re.IGNORECASE)
ANCHOR_CLOSE_PATTERN = re.compile(r'</a\s*>', re.IGNORECASE)


@dataclass(frozen=True)
class LinkableEntity:
    """A known name and the wiki page it links to."""
    name: str
    slug: str
    entity_type: str = ENTITY_TYPE_ENTREPRENEUR

    @property
    def url(self):
        """Absolute slugs are used as-is; bare slugs resolve by entity type."""
        if self.slug.startswith('/'):
            return self.slug
        prefix = ENTITY_URL_PREFIXES.get(self.entity_type, ENTITY_URL_PREFIXES[ENTITY_TYPE_ENTREPRENEUR])
        return f"{prefix}{self.slug}"


def _sort_longest_first(entities):
    return sorted(entities, key=lambda entity: len(entity.name), reverse=True)


class AutoLinkService:
    """Links known entity names inside rendered HTML."""

    @staticmethod
    def apply_auto_links(html, entities, link_all=False):
        """
        Wrap occurrences of known entity names in internal links.

        Only text between tags is scanned, and never text that already sits
        inside an <a> element. Names are matched case-sensitively on word
        boundaries, longest name first, so "Jean-Pierre Dupont" wins over
        "Jean" at the same position.

        Args:
            html: Rendered, sanitized HTML
            entities: Iterable of LinkableEntity
            link_all: Link every occurrence instead of only the first one per name

        Returns:
            str: HTML with auto-links inserted
        """
        if not html or not entities:
            return html

        by_name = {}
        for entity in _sort_longest_first(entities):
            if entity.name and entity.name not in by_name:
                by_name[entity.name] = entity
        if not by_name:
            return html

        alternation = '|'.join(re.escape(name) for name in by_name)
        name_pattern = re.compile(rf'(?<!\w)(?:{alternation})(?!\w)')
        linked_names = set()

        def replace_name(match):
            name = match.group(0)
            if not link_all and name in linked_names:
                return name
            linked_names.add(name)
            entity = by_name[name]
            return (
                f'<a href="{escape(entity.url)}" class="{CSS_CLASS_AUTOLINK}" '
                f'title="Voir la page {escape(entity.name)}">{name}</a>'
            )

        parts = TAG_SPLIT_PATTERN.split(html)
        anchor_depth = 0
        for index, part in enumerate(parts):
            if index % 2:
                if ANCHOR_CLOSE_PATTERN.match(part):
                    anchor_depth = max(anchor_depth - 1, 0)
                elif ANCHOR_OPEN_PATTERN.match(part):
                    anchor_depth += 1
                continue
            if part and not anchor_depth:
                parts[index] = name_pattern.sub(replace_name, part)

        return ''.join(parts)

    @staticmethod
    def get_static_entities():
        """
        Get the built-in country, sector and glossary entities.

        Returns:
            list[LinkableEntity]: Sorted longest name first
        """
        entities = [LinkableEntity(name, slug, ENTITY_TYPE_COUNTRY) for name, slug in STATIC_COUNTRY_ENTITIES]
        entities += [LinkableEntity(name, slug, ENTITY_TYPE_SECTOR) for name, slug in STATIC_SECTOR_ENTITIES]
        entities += [LinkableEntity(name, slug, ENTITY_TYPE_TERM) for name, slug in STATIC_TERM_ENTITIES]
        return _sort_longest_first(entities)

    @staticmethod
    def get_linkable_entities(use_cache=True):
        """
        Build the full entity table used for auto-linking.

        Published entrepreneurs contribute their full name, plus their last
        name when no other published entrepreneur shares it. Sector rows and
        the static lists complete the table.

        Args:
            use_cache: Whether to use the cached table

        Returns:
            list[LinkableEntity]: Sorted longest name first
        """
        from wiki.models import Entrepreneur, Sector

        if use_cache:
            cached = cache.get(LINKABLE_ENTITIES_CACHE_KEY)
            if cached is not None:
                return cached

        entrepreneurs = list(
            Entrepreneur.objects.filter(is_published=True).only('slug', 'first_name', 'last_name')
        )
        last_name_counts = Counter(e.last_name for e in entrepreneurs if e.last_name)

        entities = []
        for entrepreneur in entrepreneurs:
            entities.append(LinkableEntity(entrepreneur.full_name, entrepreneur.slug, ENTITY_TYPE_ENTREPRENEUR))
            if last_name_counts.get(entrepreneur.last_name) == 1:
                entities.append(LinkableEntity(entrepreneur.last_name, entrepreneur.slug, ENTITY_TYPE_ENTREPRENEUR))

        for sector in Sector.objects.all():
            entities.append(LinkableEntity(sector.name, sector.slug, ENTITY_TYPE_SECTOR))

        entities = _sort_longest_first(entities + AutoLinkService.get_static_entities())

        if use_cache:
            timeout = getattr(settings, 'AFRIWIKI_ENTITY_CACHE_TIMEOUT', CACHE_TIMEOUT_ENTITIES)
            cache.set(LINKABLE_ENTITIES_CACHE_KEY, entities, timeout)
        logger.debug(f"Built linkable entity table: {len(entities)} entries")

        return entities

    @staticmethod
    def invalidate_cache():
        """Drop the cached entity table so the next render rebuilds it."""
        cache.delete(LINKABLE_ENTITIES_CACHE_KEY)
        logger.debug("Linkable entity cache invalidated")
