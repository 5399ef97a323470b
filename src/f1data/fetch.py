"""HTTP fetch of results archive pages."""

import logging

import requests

from f1data.models import PageTarget
from f1data.util import HttpStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds
MAX_ERROR_BODY = 500  # characters of response body kept on HTTP errors


class Fetcher:
    """Fetch pages over one owned ``requests.Session``.

    One GET per call: no retries, no caching. Non-2xx responses raise
    :class:`HttpStatusError`; transport failures raise :class:`TransportError`
    tagged with the phase that failed ("connect" or "read-body").
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def fetch(self, target: PageTarget) -> str:
        url = target.url
        logger.info("[%s] %s", url, target.method)
        try:
            resp = self.session.request(
                target.method, url, timeout=self.timeout, stream=True,
            )
        except requests.RequestException as e:
            raise TransportError(url, "connect", e) from e

        with resp:
            logger.info("[%s] Response: HTTP %d", url, resp.status_code)
            logger.debug("[%s] Headers: %s", url, dict(resp.headers))

            try:
                text = resp.text
            except requests.RequestException as e:
                raise TransportError(url, "read-body", e) from e

            if not resp.ok:
                raise HttpStatusError(url, resp.status_code, text[:MAX_ERROR_BODY])

        logger.debug("OK %s (%d chars)", url, len(text))
        return text
