"""
Constants and configuration values for the wiki app.

This module centralizes the regex patterns, CSS class names, static entity
lists and cache settings used by the content rendering services.
"""
import re

# Cache Settings
LINKABLE_ENTITIES_CACHE_KEY = 'wiki:linkable_entities'
CACHE_TIMEOUT_ENTITIES = 3600  # 1 hour

# Verification Levels
VERIFICATION_LEVELS = {
    1: 'Basique',
    2: 'Vérifié',
    3: 'Pro',
    4: 'Notable',
}

# CSS classes shared with the site stylesheet
CSS_CLASS_H3 = 'wiki-h3'
CSS_CLASS_H4 = 'wiki-h4'
CSS_CLASS_LIST = 'wiki-list'
CSS_CLASS_PARAGRAPH = 'wiki-paragraph'
CSS_CLASS_CONTENT = 'wiki-content'
CSS_CLASS_AUTOLINK = 'wiki-autolink'

# Entity types and the URL prefix each bare slug resolves to
ENTITY_TYPE_ENTREPRENEUR = 'entrepreneur'
ENTITY_TYPE_COUNTRY = 'country'
ENTITY_TYPE_SECTOR = 'sector'
ENTITY_TYPE_TERM = 'term'

ENTITY_URL_PREFIXES = {
    ENTITY_TYPE_ENTREPRENEUR: '/e/',
    ENTITY_TYPE_COUNTRY: '/pays/',
    ENTITY_TYPE_SECTOR: '/secteur/',
    ENTITY_TYPE_TERM: '/glossaire/',
}

# Fixed-point passes before the sanitizer drops a fragment
MAX_SANITIZE_PASSES = 20

# Elements removed outright by the sanitizer
DENYLISTED_TAGS = ('iframe', 'object', 'embed', 'form', 'input', 'button', 'select', 'textarea')
DENYLISTED_TAGS_GROUP = '|'.join(DENYLISTED_TAGS)

# Sanitizer patterns (applied in this order)
# Paired blocks are (opening, closing) patterns. A block runs from an opening
# tag to the first closing tag after it.
SCRIPT_BLOCK_PATTERNS = [
    (re.compile(r'<script\b', re.IGNORECASE), re.compile(r'</script\s*>', re.IGNORECASE)),
]
SCRIPT_TAG_PATTERN = re.compile(r'</?script[^>]*>?', re.IGNORECASE)
# A whitespace run only matches from its first character
EVENT_HANDLER_PATTERN = re.compile(
    r'''(?:(?<![\s/])[\s/]+|(?<=["']))on\w+\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]*)''',
    re.IGNORECASE,
)
JAVASCRIPT_HREF_PATTERN = re.compile(
    r'''href\s*=\s*(?:"\s*javascript\s*:[^"]*"|'\s*javascript\s*:[^']*'|javascript\s*:[^\s>]*)''',
    re.IGNORECASE,
)
JAVASCRIPT_SRC_PATTERN = re.compile(
    r'''src\s*=\s*(?:"\s*javascript\s*:[^"]*"|'\s*javascript\s*:[^']*'|javascript\s*:[^\s>]*)''',
    re.IGNORECASE,
)
DENYLISTED_BLOCK_PATTERNS = [
    (re.compile(rf'<{tag}\b', re.IGNORECASE), re.compile(rf'</{tag}\s*>', re.IGNORECASE))
    for tag in DENYLISTED_TAGS
]
# Unterminated tags are removed up to the end of the fragment
DENYLISTED_TAG_PATTERN = re.compile(rf'</?(?:{DENYLISTED_TAGS_GROUP})\b[^>]*>?', re.IGNORECASE)
CSS_EXPRESSION_PATTERN = re.compile(r'expression\s*\([^)]*\)?', re.IGNORECASE)
JAVASCRIPT_SCHEME_PATTERN = re.compile(r'javascript\s*:', re.IGNORECASE)
META_TAG_PATTERN = re.compile(r'<(?:meta|link|base)\b[^>]*>?', re.IGNORECASE)
DATA_URI_SRC_PATTERN = re.compile(r'''src\s*=\s*["']data:(?!image/)[^"']*["']''', re.IGNORECASE)

# Allowlist used by the strict (bleach) sanitizer
ALLOWED_HTML_TAGS = [
    'p', 'br', 'strong', 'em', 'b', 'i', 'u',
    'ul', 'ol', 'li', 'h2', 'h3', 'h4',
    'blockquote', 'hr', 'a',
]
ALLOWED_HTML_ATTRS = {
    '*': ['class'],
    'a': ['href', 'title', 'rel', 'target', 'class'],
}
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']

# Content detection: a "<letter" with a ">" somewhere after it
HTML_TAG_START_PATTERN = re.compile(r'<[a-z]', re.IGNORECASE)

# Markdown block structure
BLOCK_SPLIT_PATTERN = re.compile(r'\n\n+')
BULLET_LINE_PATTERN = re.compile(r'^[*\-] ', re.MULTILINE)
ORDERED_LINE_PATTERN = re.compile(r'^\d+\. ', re.MULTILINE)

# Markdown inline patterns (applied in this order)
EXTERNAL_LINK_PATTERN = re.compile(r'\[([^\]]+)\]\((https?://[^)]+)\)')
INTERNAL_LINK_PATTERN = re.compile(r'\[([^\]]+)\]\((/[^)]+)\)')
ANY_LINK_PATTERN = re.compile(r'\[([^\]]+)\]\([^)]+\)')
BOLD_ITALIC_PATTERN = re.compile(r'\*\*\*(.+?)\*\*\*')
BOLD_PATTERN = re.compile(r'\*\*(.+?)\*\*')
ITALIC_PATTERN = re.compile(r'\*(.+?)\*')

# Static entity table: countries and demonyms
STATIC_COUNTRY_ENTITIES = [
    ('Bénin', 'bj'),
    ('béninois', 'bj'),
    ('béninoise', 'bj'),
    ('Sénégal', 'sn'),
    ('sénégalais', 'sn'),
    ('Nigeria', 'ng'),
    ('nigérian', 'ng'),
    ("Côte d'Ivoire", 'ci'),
    ('ivoirien', 'ci'),
    ('Kenya', 'ke'),
    ('kenyan', 'ke'),
    ('Ghana', 'gh'),
    ('ghanéen', 'gh'),
    ('Rwanda', 'rw'),
    ('rwandais', 'rw'),
    ('Afrique du Sud', 'za'),
    ('sud-africain', 'za'),
    ('Maroc', 'ma'),
    ('marocain', 'ma'),
    ('Égypte', 'eg'),
    ('égyptien', 'eg'),
    ('Togo', 'tg'),
    ('togolais', 'tg'),
    ('Cameroun', 'cm'),
    ('camerounais', 'cm'),
]

# Static entity table: sectors
STATIC_SECTOR_ENTITIES = [
    ('fintech', 'fintech'),
    ('Fintech', 'fintech'),
    ('e-commerce', 'ecommerce'),
    ('agritech', 'agritech'),
    ('Agritech', 'agritech'),
    ('healthtech', 'healthtech'),
    ('edtech', 'edtech'),
    ('Edtech', 'edtech'),
    ('logistique', 'logistique'),
    ('énergie', 'energie'),
    ('intelligence artificielle', 'ia'),
    ('IA', 'ia'),
    ('digitalisation', 'digital'),
]

# Static entity table: glossary terms
STATIC_TERM_ENTITIES = [
    ('entrepreneur', 'entrepreneur'),
    ('entrepreneurs', 'entrepreneur'),
    ('startup', 'startup'),
    ('startups', 'startup'),
    ('levée de fonds', 'levee-de-fonds'),
    ('incubateur', 'incubateur'),
    ('accélérateur', 'accelerateur'),
    ('capital-risque', 'capital-risque'),
    ('business angel', 'business-angel'),
    ('licorne', 'licorne'),
    ('Afrique', 'afrique'),
    ('africain', 'afrique'),
    ('africaine', 'afrique'),
    ('africains', 'afrique'),
]
