from typing import Protocol

import requests

from .errors import RemoteFetchError


class RemoteFetcher(Protocol):
    """Minimal fetch interface used by EnvVar.remote."""
    def get_bytes(self, url: str) -> bytes:
        ...


class RequestsFetcher:
    """requests.Session-based fetcher: one plain GET, no retry, no timeout."""
    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or requests.Session()

    def get_bytes(self, url: str) -> bytes:
        """Returns the full body of a 200 response, else raises RemoteFetchError."""
        try:
            resp = self.session.get(url, stream=True)
        except requests.RequestException as e:
            raise RemoteFetchError(f"error getting from remote: {e}") from e
        with resp:
            if resp.status_code != 200:
                raise RemoteFetchError(
                    f"bad status getting from remote: {resp.status_code}",
                    status_code=resp.status_code,
                )
            try:
                return resp.content
            except requests.RequestException as e:
                raise RemoteFetchError(f"error reading: {e}", status_code=resp.status_code) from e


class FetcherFactory:
    """Factory for creating RemoteFetcher instances."""
    @staticmethod
    def default() -> RemoteFetcher:
        return RequestsFetcher()


def read_url(url: str, session: requests.Session | None = None) -> bytes:
    return RequestsFetcher(session).get_bytes(url)
