"""Shared, serialized generator instances.

The pure functions in this package thread state explicitly. When several
callers need to draw from one stream, wrap it in an ``RNGServer``: every
request does its read-modify-write of the held state under a single lock,
so no two callers ever observe the same intermediate state.

``RNGRegistry`` keeps named servers for a process. It is an ordinary
object; nothing here is module-global.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from .models import DEFAULT_SEED, GeneratorState, seed_from_combined, seed_from_parts
from .mwc import next_uint
from .sampling import int_in_range, normal, uniform
from .shuffle import shuffle

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class RNGError(Exception):
    """Base class for shared-instance failures."""


class RNGUnavailableError(RNGError):
    """The server was closed or the requested name is not registered."""


class RNGAlreadyStartedError(RNGError):
    """A server with this name is already registered."""


class RNGServer:
    """One generator stream behind a lock."""

    def __init__(self, seed: GeneratorState = DEFAULT_SEED, *, name: str = "default"):
        self.name = name
        self._state = seed
        self._lock = threading.Lock()
        self._closed = False

    def __repr__(self) -> str:
        return f"RNGServer(name={self.name!r}, closed={self._closed})"

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def state(self) -> GeneratorState:
        with self._lock:
            self._ensure_open()
            return self._state

    def _ensure_open(self) -> None:
        if self._closed:
            raise RNGUnavailableError(f"RNG server '{self.name}' is closed")

    def _apply(self, step: Callable[[GeneratorState], Tuple[GeneratorState, R]]) -> R:
        with self._lock:
            self._ensure_open()
            self._state, value = step(self._state)
            return value

    def set_seed(self, w: int, z: Optional[int] = None) -> None:
        """Replace the held state.

        With one argument ``w`` is a combined seed split as
        ``(w >> 16, w & 0xFFFFFFFF)``; with two, they are the halves.
        """
        seed = seed_from_combined(w) if z is None else seed_from_parts(w, z)
        with self._lock:
            self._ensure_open()
            self._state = seed
        logger.info("RNG server %s reseeded to (%d, %d)", self.name, seed.w, seed.z)

    def get_uint(self) -> int:
        return self._apply(next_uint)

    def get_int(self, minimum: int, maximum: int) -> int:
        return self._apply(lambda state: int_in_range(state, minimum, maximum))

    def get_uniform(self) -> float:
        return self._apply(uniform)

    def get_normal(self) -> float:
        return self._apply(normal)

    def shuffle(self, sequence: Sequence[T]) -> List[T]:
        return self._apply(lambda state: shuffle(state, sequence))

    def close(self) -> None:
        with self._lock:
            self._closed = True
        logger.debug("RNG server %s closed", self.name)


class RNGRegistry:
    """Named RNG servers, looked up by callers that share a stream."""

    def __init__(self) -> None:
        self._servers: Dict[str, RNGServer] = {}
        self._lock = threading.Lock()

    def start(self, name: str, seed: GeneratorState = DEFAULT_SEED) -> RNGServer:
        with self._lock:
            if name in self._servers:
                raise RNGAlreadyStartedError(f"RNG server '{name}' is already running")
            server = RNGServer(seed, name=name)
            self._servers[name] = server
        logger.info("Started RNG server %s with seed (%d, %d)", name, seed.w, seed.z)
        return server

    def get(self, name: str) -> RNGServer:
        with self._lock:
            server = self._servers.get(name)
        if server is None:
            raise RNGUnavailableError(f"No RNG server named '{name}'")
        return server

    def stop(self, name: str) -> None:
        with self._lock:
            server = self._servers.pop(name, None)
        if server is None:
            raise RNGUnavailableError(f"No RNG server named '{name}'")
        server.close()
        logger.info("Stopped RNG server %s", name)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._servers)
