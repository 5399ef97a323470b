"""Entity fragment resolution from summary row links.

Summary rows link to detail pages with paths such as::

    /en/results.html/1950/races/100/italy/race-result.html
    /en/results.html/1950/drivers/NINFAR01/nino-farina.html
    /en/results.html/1950/team/alfa_romeo_ferrari.html

The identity sits right after the section segment, so the first five
``/``-separated tokens (including the empty one before the leading slash)
are skipped.
"""

from f1data.models import Circuit, Driver, Team
from f1data.util import IndexParseFailure, MalformedUrl

_SKIP_SEGMENTS = 5
_MAX_CIRCUIT_INDEX = 0xFFFF


def _identity_tokens(href: str, count: int) -> list[str]:
    tokens = href.split("/")[_SKIP_SEGMENTS:_SKIP_SEGMENTS + count]
    if len(tokens) != count or not all(tokens):
        raise MalformedUrl(href)
    return tokens


def _strip_html(token: str) -> str:
    return token.removesuffix(".html")


def resolve_circuit(href: str, display_name: str) -> Circuit:
    idx_token, slug = _identity_tokens(href, 2)
    if not (idx_token.isascii() and idx_token.isdigit()):
        raise IndexParseFailure(idx_token, href)
    index = int(idx_token)
    if index > _MAX_CIRCUIT_INDEX:
        raise IndexParseFailure(idx_token, href)
    return Circuit(index=index, slug=_strip_html(slug), display_name=display_name)


def resolve_driver(href: str, display_name: str) -> Driver:
    driver_id, slug = _identity_tokens(href, 2)
    return Driver(id=driver_id, slug=_strip_html(slug), display_name=display_name)


def resolve_team(href: str, display_name: str) -> Team:
    (slug,) = _identity_tokens(href, 1)
    return Team(slug=_strip_html(slug), display_name=display_name)
