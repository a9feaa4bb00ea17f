"""
In-memory LRU cache of validated API keys.

Entries are ``(account_name, api_key)`` pairs that the identity provider has
confirmed. Presence is the only information stored; entries leave the cache
only through least-recently-used eviction.
"""

import logging
import threading
from collections import OrderedDict
from typing import Tuple

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 10000

CacheKey = Tuple[str, str]


class KeyCache:
    """Bounded, thread-safe set of known-valid (account, key) pairs."""

    def __init__(self, capacity: int = DEFAULT_CACHE_SIZE):
        """
        Initialize key cache.

        Args:
            capacity: Maximum number of pairs held at once

        Raises:
            ConfigurationError: If capacity is smaller than 1
        """
        if capacity < 1:
            raise ConfigurationError(f"Key cache capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries: "OrderedDict[CacheKey, None]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def contains(self, account_name: str, api_key: str) -> bool:
        """
        Check whether a pair is cached as valid.

        A hit marks the pair as most recently used.

        Args:
            account_name: Account identifier
            api_key: API key presented for the account

        Returns:
            True if the pair is cached, False otherwise
        """
        entry = (account_name, api_key)
        with self._lock:
            if entry not in self._entries:
                return False
            self._entries.move_to_end(entry)
            return True

    def add(self, account_name: str, api_key: str) -> None:
        """
        Mark a pair as valid, evicting the least recently used pair when full.

        Args:
            account_name: Account identifier
            api_key: API key confirmed by the identity provider
        """
        entry = (account_name, api_key)
        with self._lock:
            if entry in self._entries:
                self._entries.move_to_end(entry)
                return
            self._entries[entry] = None
            if len(self._entries) > self._capacity:
                evicted_account, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cached API key", extra={"account": evicted_account})
