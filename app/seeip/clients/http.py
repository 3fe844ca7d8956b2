"""HTTP fetcher for the seeip endpoints.

Issues one GET per call and returns the body as text. Any failure while
talking to the endpoint becomes a SeeIPError with kind BAD_WEB_REQUEST and the
original exception as its cause.

Usage:
    from seeip.clients.http import HttpFetcher

    fetcher = HttpFetcher()
    body = fetcher.fetch_text("https://ip4.seeip.org/")
    body = await fetcher.fetch_text_async("https://ip4.seeip.org/")
"""

import asyncio

import requests

from seeip.errors import ErrorKind, SeeIPError
from seeip.logging import get_module_logger

logger = get_module_logger()


class HttpFetcher:
    """Fetches URL bodies as text.

    A new requests.Session is opened and closed for every call; no connection
    is reused across calls. No timeout is set, so the requests default applies.
    """

    def __init__(self) -> None:
        self._logger = logger.bind(component="http_fetcher")

    def fetch_text(self, url: str) -> str:
        """Send a GET request and return the response body.

        The body is returned whatever the status code.

        Args:
            url: URL to fetch

        Returns:
            Response body decoded as text

        Raises:
            SeeIPError: BAD_WEB_REQUEST on any failure during the request
        """
        log = self._logger.bind(url=url)
        log.debug("fetching_url")

        try:
            with requests.Session() as session:
                response = session.get(url)
                text = response.text
        except requests.Timeout as e:
            log.error("fetch_timeout", error=str(e))
            raise SeeIPError(ErrorKind.BAD_WEB_REQUEST, cause=e) from e
        except requests.ConnectionError as e:
            log.error("fetch_connection_error", error=str(e))
            raise SeeIPError(ErrorKind.BAD_WEB_REQUEST, cause=e) from e
        except requests.RequestException as e:
            log.error("fetch_request_error", error=str(e))
            raise SeeIPError(ErrorKind.BAD_WEB_REQUEST, cause=e) from e
        except Exception as e:
            log.error("fetch_unexpected_error", error=str(e), exc_info=True)
            raise SeeIPError(ErrorKind.BAD_WEB_REQUEST, cause=e) from e

        log = log.bind(status_code=response.status_code)
        if not response.ok:
            log.warning("fetch_non_success_status", body=text)
        else:
            log.debug("fetch_success")
        return text

    async def fetch_text_async(self, url: str) -> str:
        """Asynchronously fetch a URL; same contract as fetch_text."""
        return await asyncio.to_thread(self.fetch_text, url)
