"""Blocking HTTP transport for the storage gateway, built on requests."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

import requests

from .errors import GatewayError
from .types import UploadProgress

_LOG = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "*/*"}
CHUNK_SIZE = 8192

ProgressCallback = Callable[[UploadProgress], None]


def handle_error(error: Exception | requests.Response, url: str) -> GatewayError:
    """Turn a transport failure or an error response into a GatewayError.

    Shared by every gateway call so callers see a single error type.
    """
    if isinstance(error, requests.Response):
        try:
            body = error.json()
            msg = body.get("message") or body.get("error") or error.text
        except (ValueError, AttributeError):
            msg = error.text
        _LOG.error("gateway url=%s status=%s: %s", url, error.status_code, msg)
        return GatewayError(
            f"Gateway rejected request ({error.status_code}): {msg}",
            url=url,
            status_code=error.status_code,
        )
    _LOG.error("gateway url=%s failed: %s", url, error)
    return GatewayError(f"POST {url} failed: {error}", url=url)


class _ProgressReader:
    """File-like request body that reports how much has been read."""

    def __init__(self, body: bytes, callback: ProgressCallback):
        self._body = body
        self._callback = callback
        self._pos = 0

    def __len__(self) -> int:
        return len(self._body)

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            size = len(self._body) - self._pos
        chunk = self._body[self._pos:self._pos + size]
        self._pos += len(chunk)
        if chunk:
            self._callback(UploadProgress(sent=self._pos, total=len(self._body)))
        return chunk


class HttpTransport:
    """Thin wrapper around requests sessions for gateway POSTs.

    Calls run in ``asyncio.to_thread`` workers and ``requests.Session`` is not
    documented as thread-safe, so by default each worker thread gets its own
    session.  A *session* passed in is shared by every thread; the caller is
    then responsible for it being safe to use concurrently.
    """

    def __init__(self, session: requests.Session | None = None, timeout: float | None = 30):
        self._shared = session
        self._timeout = timeout
        self._local = threading.local()
        self._owned: list[requests.Session] = []
        self._lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """The session for the calling thread."""
        if self._shared is not None:
            return self._shared
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._owned.append(session)
        return session

    def post(
        self,
        url: str,
        body: bytes | None = None,
        *,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> requests.Response:
        """POST *body* and return the full response.

        Raises:
            GatewayError: On connection failures and non-2xx responses.
        """
        data = body
        if body and progress is not None:
            data = _ProgressReader(body, progress)
        _LOG.debug("POST %s (%s bytes)", url, len(body) if body else 0)
        try:
            resp = self.session.post(
                url,
                data=data,
                params=params,
                headers=headers or JSON_HEADERS,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise handle_error(e, url) from e

        if not 200 <= resp.status_code < 300:
            raise handle_error(resp, url)
        return resp

    def close(self) -> None:
        if self._shared is not None:
            self._shared.close()
        with self._lock:
            owned, self._owned = self._owned, []
        for session in owned:
            session.close()
