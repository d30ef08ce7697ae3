"""
HTML-aware truncation for post previews.

Cuts an HTML fragment (or the body of a full document) down to roughly
``max_length`` characters of visible text, preferring sentence and word
boundaries, and maps the text cut back onto the markup so the prefix can be
handed to the renderer as-is.
"""
import logging
import re
from typing import NamedTuple

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 300
ELLIPSIS = '...'

BOUNDARY_RATIO = 0.7        # boundaries earlier than this share of the budget are ignored
MIN_HTML_OFFSET = 50        # scan results below this are not trusted
MIN_VISIBLE_TEXT = 10       # a slice with less text than this counts as failed
ESTIMATE_MULTIPLIER = 2     # markup chars per visible char when the scan is not trusted
RAW_SLICE_MULTIPLIER = 3    # last-resort slice of the raw input

SENTENCE_MARKS = ('.', '!', '?')

# Applied in this order.
BASIC_ENTITIES = {
    '&nbsp;': ' ',
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
}

_DOCUMENT_MARKERS = ('<!doctype', '<html', '<body')
_BODY_RE = re.compile(r'<body[^>]*>(.*?)</body>', re.IGNORECASE | re.DOTALL)
_HEAD_END_RE = re.compile(r'</head>(.*)', re.IGNORECASE | re.DOTALL)
_TRAILING_BODY_RE = re.compile(r'</body>.*$', re.IGNORECASE | re.DOTALL)
_TRAILING_HTML_RE = re.compile(r'</html>.*$', re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r'<[^>]*>')


class TruncationResult(NamedTuple):
    content: str
    is_truncated: bool


def extract_body(html):
    """Return the renderable part of ``html``.

    Fragments come back untouched. Full documents are narrowed to the
    interior of ``<body>``, or to whatever follows ``</head>`` when there is
    no body pair. Anything unrecognisable is returned as given.
    """
    lowered = html.lower()
    if not any(marker in lowered for marker in _DOCUMENT_MARKERS):
        return html

    body_match = _BODY_RE.search(html)
    if body_match and body_match.group(1):
        return body_match.group(1).strip()

    head_match = _HEAD_END_RE.search(html)
    if head_match and head_match.group(1):
        rest = _TRAILING_BODY_RE.sub('', head_match.group(1))
        rest = _TRAILING_HTML_RE.sub('', rest)
        return rest.strip()

    return html


def _strip_tags_regex(html):
    text = _TAG_RE.sub('', html)
    for entity, char in BASIC_ENTITIES.items():
        text = text.replace(entity, char)
    return text.strip()


def strip_tags(html):
    """Visible text of ``html``, entities decoded and trimmed."""
    try:
        return BeautifulSoup(html, 'lxml').get_text().strip()
    except Exception as e:
        logger.debug(f"HTML parser failed, using regex strip: {e}")
        return _strip_tags_regex(html)


def find_break_point(plain_text, max_length):
    """Text offset to cut ``plain_text`` at for a ``max_length`` budget."""
    window = plain_text[:max_length + 1]
    threshold = max_length * BOUNDARY_RATIO

    last_punctuation = max(window.rfind(mark) for mark in SENTENCE_MARKS)
    if last_punctuation > threshold:
        return last_punctuation + 1

    last_space = window.rfind(' ')
    if last_space > threshold:
        return last_space

    return max_length


def map_text_offset(body, truncate_at):
    """Offset into ``body`` whose prefix holds ``truncate_at`` text characters.

    Tags count for nothing. The scan stops right after the character that
    reaches the target, so it never ends inside a tag. Results under
    MIN_HTML_OFFSET are replaced by a length estimate.
    """
    html_position = 0
    text_position = 0
    in_tag = False

    for i, char in enumerate(body):
        if text_position >= truncate_at:
            break
        if char == '<':
            in_tag = True
        elif char == '>':
            in_tag = False
        elif not in_tag:
            text_position += 1
        html_position = i + 1

    if html_position < MIN_HTML_OFFSET:
        estimate = min(len(body), truncate_at * ESTIMATE_MULTIPLIER)
        logger.debug(f"Offset {html_position} below floor, estimating {estimate}")
        html_position = estimate

    return html_position


def _drop_open_tag(fragment):
    """Cut a trailing tag that was opened but never closed."""
    last_open = fragment.rfind('<')
    if last_open > fragment.rfind('>'):
        return fragment[:last_open]
    return fragment


def truncate_html(html, max_length=DEFAULT_MAX_LENGTH):
    """Shorten ``html`` to about ``max_length`` characters of visible text.

    Returns a TruncationResult. Input whose text already fits comes back as
    its body content with ``is_truncated`` False. Never raises: every
    malformed-input path degrades to a best-effort slice.
    """
    if not html or not html.strip():
        return TruncationResult(html or '', False)

    max_length = max(0, max_length)

    body = extract_body(html)
    plain_text = strip_tags(body)

    if len(plain_text) <= max_length:
        return TruncationResult(body, False)

    truncate_at = find_break_point(plain_text, max_length)
    html_position = map_text_offset(body, truncate_at)

    truncated = _drop_open_tag(body[:html_position]).strip()

    if len(strip_tags(truncated)) < MIN_VISIBLE_TEXT:
        html_position = min(len(html), max_length * RAW_SLICE_MULTIPLIER)
        logger.debug(f"Mapped slice had no usable text, taking raw slice of {html_position}")
        truncated = html[:html_position].strip()

    if len(truncated) < len(body):
        truncated += ELLIPSIS

    return TruncationResult(truncated, True)
