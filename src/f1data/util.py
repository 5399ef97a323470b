"""Common utilities and exception classes."""

import re

_WS_PATTERN = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Trim and collapse runs of whitespace to a single space."""
    return _WS_PATTERN.sub(" ", text).strip()


class F1dataError(Exception):
    """Base exception for f1data.

    Carries a context stack so callers can annotate where a failure happened
    without changing its type. ``str()`` renders ``outer: inner: message``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.context: list[str] = []

    def add_context(self, context: str) -> "F1dataError":
        self.context.insert(0, context)
        return self

    def __str__(self) -> str:
        return ": ".join([*self.context, self.message])


class FetchError(F1dataError):
    """HTTP fetch failure."""


class TransportError(FetchError):
    """Connection or body read failure (phase is "connect" or "read-body")."""

    def __init__(self, url: str, phase: str, cause: Exception) -> None:
        super().__init__(f"{phase} failed for {url}: {cause}")
        self.url = url
        self.phase = phase


class HttpStatusError(FetchError):
    """Non-success HTTP status."""

    def __init__(self, url: str, status_code: int, body: str) -> None:
        super().__init__(f"request failed: HTTP {status_code} for {url}: {body}")
        self.url = url
        self.status_code = status_code
        self.body = body


class ExtractError(F1dataError):
    """Table extraction failure."""


class TableNotFound(ExtractError):
    def __init__(self, selector: str) -> None:
        super().__init__(f"table not found: {selector}")
        self.selector = selector


class DecodeError(F1dataError):
    """Row or header decoding failure."""

    def __init__(self, message: str, column: str | None = None) -> None:
        super().__init__(message)
        self.column = column
        if column:
            self.add_context(f"column: {column}")


class InvalidColumnCount(DecodeError):
    def __init__(
        self, expected: int, actual: int, column: str | None = None,
    ) -> None:
        super().__init__(
            f"invalid column count: expected {expected}, got {actual}", column=column,
        )
        self.expected = expected
        self.actual = actual


class MissingExpectedCell(DecodeError):
    """A column lacks the element its strategy needs (e.g. <a> or href)."""


class ResolveError(F1dataError):
    """Entity fragment resolution failure."""


class MalformedUrl(ResolveError):
    def __init__(self, href: str) -> None:
        super().__init__(f"can't parse url: invalid format: {href}")
        self.href = href


class IndexParseFailure(ResolveError):
    def __init__(self, token: str, href: str) -> None:
        super().__init__(
            f"parse circuit index from url (token: `{token}`): `{href}`"
        )
        self.token = token
        self.href = href


class UrlError(F1dataError):
    """Page target construction failure."""


class InvalidUrl(UrlError):
    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"parse url: {url}: {cause}")
        self.url = url


class EntityNotFound(F1dataError):
    def __init__(self, year: int, name: str) -> None:
        super().__init__(f"find entity for year `{year}` with name: {name}")
        self.year = year
        self.name = name
