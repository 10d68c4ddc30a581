"""
Background event loop for the Streamlit front end.

Streamlit reruns the script on every interaction, but the connection pool
must live on one event loop for the whole process. ``BackgroundLoop`` keeps
that loop on a dedicated thread and lets script code submit coroutines to
it and wait for their results.
"""

import asyncio
import threading
from typing import Any, Coroutine, Optional

from ..core import get_logger

logger = get_logger(__name__)


class BackgroundLoop:
    """An asyncio event loop running forever on a daemon thread."""

    def __init__(self, name: str = "papershelf-loop"):
        self.loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    def run(self, coro: Coroutine, timeout: Optional[float] = None) -> Any:
        """
        Run a coroutine on the background loop and block for its result.

        Args:
            coro: Coroutine to schedule.
            timeout: Seconds to wait; None waits indefinitely.

        Returns:
            The coroutine's result. Its exception is re-raised here.
        """
        future = asyncio.run_coroutine_threadsafe(coro, self.loop)
        return future.result(timeout)

    def stop(self) -> None:
        """Stop the loop and wait for its thread to exit."""
        if self.loop.is_closed():
            return

        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join()
        self.loop.close()
        logger.debug("Background loop stopped")
