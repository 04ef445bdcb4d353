"""
Platform Detector

Identifies the exporting platform from a CSV header row by matching
each platform's signature headers.
"""

import logging
from typing import Iterable

from ..models import PlatformId
from .config import get_platform_configs

logger = logging.getLogger(__name__)

# Fewer matching signature headers than this never counts as a match
MIN_MATCHING_HEADERS = 3


def detect_platform(headers: Iterable[str]) -> PlatformId:
    """
    Detect the platform that produced a CSV.

    Every platform is scored by the share of its signature headers present
    in the file. Platforms with fewer than three matches are ignored; the
    highest score wins and on an exact tie the earlier platform is kept.

    Args:
        headers: Header row of the CSV (order irrelevant)

    Returns:
        Detected PlatformId, or PlatformId.UNKNOWN
    """
    header_set = {h.strip() for h in headers if h is not None}

    best_platform = PlatformId.UNKNOWN
    best_score = 0.0

    for config in get_platform_configs():
        match_count = sum(1 for p in config.header_patterns if p in header_set)
        score = match_count / len(config.header_patterns)
        logger.debug("%s: %d/%d signature headers (%.2f)",
                     config.name, match_count, len(config.header_patterns), score)

        if match_count >= MIN_MATCHING_HEADERS and score > best_score:
            best_score = score
            best_platform = config.name

    logger.info("Detected platform: %s", best_platform)
    return best_platform
