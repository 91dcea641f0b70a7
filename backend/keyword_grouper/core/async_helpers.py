"""
Async helpers for running keyword grouping off the event loop.
A grouping run is O(n²) edit distances, so it goes to a thread pool.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from functools import partial
import logging
from typing import Optional, Tuple

from keyword_grouper.core.config import get_settings
from keyword_grouper.modules.grouping import ClusterResult, cluster_text_report

logger = logging.getLogger(__name__)

# Thread pool for CPU-bound operations
_executor = ThreadPoolExecutor(max_workers=get_settings().cluster_workers)


async def async_cluster_text(
    text: str,
    threshold: float,
    mode: str = "anchor",
    length_prefilter: bool = True,
) -> Tuple[Optional[ClusterResult], int]:
    """
    Async wrapper for cluster_text_report: (result or None, skipped line count).
    Runs in thread pool to avoid blocking event loop.
    """
    loop = asyncio.get_running_loop()
    job = partial(cluster_text_report, text, threshold, mode=mode, length_prefilter=length_prefilter)
    try:
        return await loop.run_in_executor(_executor, job)
    except Exception as e:
        logger.error(f"❌ async_cluster_text failed: {e}")
        raise


def shutdown_executor():
    """Cleanup thread pool (call on app shutdown)."""
    _executor.shutdown(wait=True)
