"""
Low-level HTTP client for the QRadar REST API.

This module is responsible for:
- composing ``<base URL>/api/<endpoint>`` URLs and query strings
- the fixed ``Accept``, ``Version`` and ``SEC`` headers
- applying per-call options (query parameters and extra headers)
- honouring the caller's call context (cancellation and deadline), which
  ends a call that is still in flight
- translating ``requests`` failures into pyqradar errors

It never reads the response body and never interprets the status code:
endpoint wrappers in ``pyqradar.api`` do that, and own (close) the
returned response.
"""

from __future__ import annotations

import functools
import json
import threading
from concurrent.futures import Future
from typing import Any, Callable, Optional, Tuple

import requests
from requests.structures import CaseInsensitiveDict

from ..core.config import DEFAULT_API_VERSION, QRadarConfig
from ..core.errors import Cancelled, ConfigError, DeadlineExceeded, TransportError
from ..core.logging import get_logger, register_secret
from .context import CallContext
from .options import Option, RequestOptions, apply_options


logger = get_logger("pyqradar.http")


API_PREFIX = "api"

ACCEPT_HEADER = "Accept"
VERSION_HEADER = "Version"
SEC_HEADER = "SEC"
CONTENT_TYPE_HEADER = "Content-Type"

JSON_MEDIA_TYPE = "application/json"
ZIP_MEDIA_TYPE = "application/zip"


class QRadarHttpClient:
    """
    Request dispatcher shared by every endpoint group.

    The base URL, token and version are fixed at construction. The
    ``requests.Session`` (connection pool) is owned by this client and
    shared by all calls.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        version: str = DEFAULT_API_VERSION,
        timeout_seconds: Optional[float] = None,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the QRadar HTTP client.

        Args:
            base_url: Console URL without the ``/api`` prefix (e.g. "https://qradar.local")
            token: Authorized service token sent in the ``SEC`` header
            version: API version sent in the ``Version`` header
            timeout_seconds: Default transport timeout; None waits indefinitely
                unless the call context carries a deadline
            verify_ssl: Whether to verify TLS certificates
            session: Optional pre-built ``requests.Session`` (proxies, adapters, tests)
        """
        if not base_url:
            raise ConfigError("QRadar base_url must not be empty")
        if not token:
            raise ConfigError("QRadar token must not be empty")

        self._base_url = base_url.rstrip("/")
        self._token = token
        register_secret(token)
        self._version = version
        self._timeout_seconds = timeout_seconds
        self._verify_ssl = verify_ssl
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_config(cls, config: QRadarConfig, session: Optional[requests.Session] = None) -> "QRadarHttpClient":
        return cls(
            base_url=config.base_url,
            token=config.token,
            version=config.version,
            timeout_seconds=config.timeout_seconds,
            verify_ssl=config.verify_ssl,
            session=session,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> str:
        return self._token

    @property
    def version(self) -> str:
        return self._version

    @property
    def timeout_seconds(self) -> Optional[float]:
        return self._timeout_seconds

    @property
    def verify_ssl(self) -> bool:
        return self._verify_ssl

    @property
    def session(self) -> requests.Session:
        return self._session

    def build_url(self, endpoint: str) -> str:
        """
        Build ``<base URL>/api/<endpoint>``.

        Args:
            endpoint: Relative API path (e.g. "siem/offenses" or "/siem/offenses")
        """
        return f"{self._base_url}/{API_PREFIX}/{endpoint.lstrip('/')}"

    def _headers(self, options: RequestOptions, content_type: Optional[str] = None) -> CaseInsensitiveDict:
        """
        Fixed headers first, then the per-call ones.

        A per-call header colliding with an existing key is appended to the
        field value (comma-separated) rather than replacing it.
        """
        headers: CaseInsensitiveDict = CaseInsensitiveDict()
        headers[ACCEPT_HEADER] = JSON_MEDIA_TYPE
        headers[VERSION_HEADER] = self._version
        headers[SEC_HEADER] = self._token
        if content_type:
            headers[CONTENT_TYPE_HEADER] = content_type

        for key, values in options.headers.items():
            for value in values:
                if key in headers:
                    headers[key] = f"{headers[key]}, {value}"
                else:
                    headers[key] = value
        return headers

    def _timeout(self, ctx: CallContext) -> Tuple[Optional[float], bool]:
        """
        Transport timeout for this call, and whether it comes from the
        context deadline rather than the client default.
        """
        remaining = ctx.remaining()
        if remaining is None:
            return self._timeout_seconds, False
        if self._timeout_seconds is None or remaining <= self._timeout_seconds:
            return remaining, True
        return self._timeout_seconds, False

    def _send(
        self,
        ctx: Optional[CallContext],
        method: str,
        endpoint: str,
        options: tuple,
        data: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> requests.Response:
        # Without a caller context nothing can end the call early: send inline.
        watched = ctx is not None
        ctx = ctx if ctx is not None else CallContext.background()

        request_options = apply_options(*options)
        ctx.check()

        method = method.upper()
        url = self.build_url(endpoint)
        params = request_options.params
        timeout, deadline_bound = self._timeout(ctx)

        logger.debug(f"QRadar {method} {url}")
        if params:
            logger.debug(f"  Query params: {params}")

        request = requests.Request(
            method=method,
            url=url,
            params=params,
            headers=self._headers(request_options, content_type),
            data=data,
        )

        try:
            prepared = self._session.prepare_request(request)
            send = functools.partial(
                self._session.send,
                prepared,
                timeout=timeout,
                verify=self._verify_ssl,
                stream=True,
            )
            response = _send_watched(ctx, send, f"QRadar {method} {url}") if watched else send()
        except requests.exceptions.RequestException as e:
            if ctx.cancelled:
                raise Cancelled(f"QRadar {method} {url} cancelled") from e
            if isinstance(e, requests.exceptions.Timeout) and (deadline_bound or ctx.expired):
                raise DeadlineExceeded(f"QRadar {method} {url} exceeded its deadline") from e
            raise TransportError(f"QRadar request failed: {e}") from e

        logger.debug(f"QRadar response status: {response.status_code}")
        return response

    def do(self, ctx: Optional[CallContext], method: str, endpoint: str, *options: Option) -> requests.Response:
        """
        Perform one authenticated call without a body and return the raw response.

        Args:
            ctx: Call context (None for a background context)
            method: HTTP method (GET, POST, DELETE, ...)
            endpoint: Relative API path, without the ``/api`` prefix
            *options: ``with_param`` / ``with_header`` options, applied in order

        Returns:
            The unread, streamed ``requests.Response``. The caller must close it.

        Raises:
            ConfigurationError: If an option fails to apply
            TransportError: If the HTTP call could not be completed
            Cancelled: If ``ctx`` was cancelled
            DeadlineExceeded: If the ``ctx`` deadline elapsed
        """
        return self._send(ctx, method, endpoint, options)

    def send_json(
        self,
        ctx: Optional[CallContext],
        method: str,
        endpoint: str,
        payload: Any,
        *options: Option,
    ) -> requests.Response:
        """
        Like ``do`` but with a JSON body and ``Content-Type: application/json``.
        """
        body = json.dumps(payload).encode("utf-8")
        return self._send(ctx, method, endpoint, options, data=body, content_type=JSON_MEDIA_TYPE)

    def send_archive(
        self,
        ctx: Optional[CallContext],
        method: str,
        endpoint: str,
        archive: bytes,
        *options: Option,
    ) -> requests.Response:
        """
        Like ``do`` but with a raw ``application/zip`` body (application uploads).
        """
        return self._send(ctx, method, endpoint, options, data=archive, content_type=ZIP_MEDIA_TYPE)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "QRadarHttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _run(future: Future, send: Callable[[], requests.Response]) -> None:
    if not future.set_running_or_notify_cancel():
        return
    try:
        future.set_result(send())
    except BaseException as e:
        future.set_exception(e)


def _close_abandoned(future: Future) -> None:
    if future.exception() is None:
        future.result().close()


def _send_watched(ctx: CallContext, send: Callable[[], requests.Response], description: str) -> requests.Response:
    """
    Run ``send`` on a daemon worker and wait for it or for ``ctx`` to end.

    When ``ctx`` is cancelled or its deadline passes first, the call is
    abandoned: ``Cancelled`` / ``DeadlineExceeded`` is raised immediately and
    the response, if the worker still gets one, is closed on arrival. The
    worker itself stays bounded by the transport timeout.
    """
    future: Future = Future()
    wake = threading.Event()
    future.add_done_callback(lambda _: wake.set())
    ctx.add_callback(wake.set)

    worker = threading.Thread(target=_run, args=(future, send), name="pyqradar-http", daemon=True)
    worker.start()
    try:
        while not future.done() and not (ctx.cancelled or ctx.expired):
            wake.wait(ctx.remaining())
    finally:
        ctx.remove_callback(wake.set)

    if ctx.cancelled or ctx.expired:
        logger.debug(f"{description} abandoned in flight")
        future.add_done_callback(_close_abandoned)
        ctx.check()
    return future.result()
