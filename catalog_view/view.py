"""View model for the product list screen.

The view owns three pieces of observable state (``products``, ``loading``
and ``error``) and moves between Loading, Loaded and Failed:

    Loading  -> loading=True,  error=None,    products unchanged
    Loaded   -> loading=False, error=None,    products = response
    Failed   -> loading=False, error=message, products unchanged

The fetch runs on a single worker thread so ``load()`` returns immediately
with a Future; a front end that wants to redraw on every transition passes
``on_change``.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from .client import Product, ProductClient

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Failed to load products. Make sure the backend is running on {base_url}"


class CatalogView:
    def __init__(
        self,
        client: ProductClient,
        on_change: Optional[Callable[["CatalogView"], None]] = None,
    ):
        self._client = client
        self._on_change = on_change
        self._executor: Optional[ThreadPoolExecutor] = None
        # guards the session check and the state writes in _fetch
        self._lock = threading.Lock()
        self.error_message = ERROR_MESSAGE.format(base_url=client.base_url)
        self._reset()

    def _reset(self) -> None:
        self.products: List[Product] = []
        self.loading = True
        self.error: Optional[str] = None

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    @property
    def active(self) -> bool:
        return self._executor is not None

    def activate(self) -> Future:
        """Start a fresh screen session and issue the first load."""
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="catalog-view")
            self._reset()
        return self.load()

    def deactivate(self) -> None:
        """Drop the session state. A request still in flight is discarded."""
        with self._lock:
            if self._executor is not None:
                self._executor.shutdown(wait=False, cancel_futures=True)
                self._executor = None
            self._reset()

    def load(self) -> Future:
        """Enter Loading and fetch the product list in the background."""
        with self._lock:
            executor = self._executor
            if executor is None:
                raise RuntimeError("CatalogView.load() called before activate()")
            self.loading = True
            self.error = None
        self._notify()
        return executor.submit(self._fetch, executor)

    def _fetch(self, executor: ThreadPoolExecutor) -> None:
        try:
            products = self._client.list_products()
        except Exception:
            logger.exception("Error loading products")
            with self._lock:
                if executor is not self._executor:
                    return
                self.error = self.error_message
                self.loading = False
        else:
            with self._lock:
                if executor is not self._executor:
                    return
                self.products = products
                self.error = None
                self.loading = False
        self._notify()
