"""HTTP delivery of encoded webhook bodies — blocking or fire-and-forget."""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor

import httpx
import structlog

from loghook.hook.exceptions import DeliveryError
from loghook.hook.payload import CONTENT_TYPE

logger = structlog.get_logger(__name__)

# Worker threads carry this prefix so log handlers can recognise them.
SEND_THREAD_PREFIX = "loghook-send"


class WebhookDispatcher:
    """POSTs webhook bodies to a single endpoint.

    Synchronous delivery blocks until the response arrives and raises
    ``DeliveryError`` on failure. Asynchronous delivery hands the POST to a
    thread pool and returns immediately: the outcome is never reported to the
    caller, deliveries may land out of order, and nothing is retried. Failed
    background deliveries are only visible in this module's own log output.

    Delivering after ``close()`` raises ``DeliveryError`` in both modes.
    """

    def __init__(
        self,
        url: str,
        timeout_secs: float = 10.0,
        max_workers: int = 4,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._max_workers = max_workers
        self._http = client or httpx.Client(timeout=httpx.Timeout(timeout_secs))
        self._executor: ThreadPoolExecutor | None = None
        self._lock = threading.Lock()
        self._closed = False

    @property
    def url(self) -> str:
        return self._url

    @property
    def closed(self) -> bool:
        return self._closed

    def deliver(self, body: bytes, asynchronous: bool = False) -> None:
        """Send *body* to the webhook URL.

        Raises:
            DeliveryError: the dispatcher is closed, or the POST failed
                (synchronous mode only).
        """
        if asynchronous:
            with self._lock:
                if self._closed:
                    raise DeliveryError("dispatcher is closed")
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(
                        max_workers=self._max_workers,
                        thread_name_prefix=SEND_THREAD_PREFIX,
                    )
                future = self._executor.submit(self._post, body)
            future.add_done_callback(_log_background_failure)
            return
        if self._closed:
            raise DeliveryError("dispatcher is closed")
        self._post(body)

    def _post(self, body: bytes) -> None:
        try:
            response = self._http.post(
                self._url,
                content=body,
                headers={"Content-Type": CONTENT_TYPE},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DeliveryError(
                f"webhook returned {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DeliveryError(f"webhook request failed: {exc}") from exc
        except RuntimeError as exc:
            # httpx refuses to send on a client closed underneath us.
            raise DeliveryError(f"webhook client unavailable: {exc}") from exc

    # ── Lifecycle ───────────────────────────────────────────────

    def close(self) -> None:
        """Wait for in-flight background deliveries, then close the client."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
        self._http.close()

    def __enter__(self) -> WebhookDispatcher:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def _log_background_failure(future: Future[None]) -> None:
    exc = future.exception()
    if exc is not None:
        logger.warning("webhook_background_delivery_failed", error=str(exc))
