from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests

from pura_admin.services.api_client import ApiClient
from pura_admin.services.resources import OVERVIEW_SECTIONS, get_resource
from pura_admin.utils.errors import ApiError
from pura_admin.utils.logging import logger
from pura_admin.utils.typing import RecentItem

RECENT_LIMIT = 7

@dataclass
class Overview:
    counts: Dict[str, int] = field(default_factory=dict)
    recent: List[RecentItem] = field(default_factory=list)
    error: Optional[str] = None

def load_overview(client: ApiClient, limit: int = RECENT_LIMIT) -> Overview:
    """Record counts per content section and the most recently created records."""
    overview = Overview()
    recent: List[RecentItem] = []
    try:
        for slug, kind in OVERVIEW_SECTIONS:
            spec = get_resource(slug)
            records = spec.api(client).get_all()
            overview.counts[slug] = len(records)
            recent.extend(
                RecentItem(id=r.id, kind=kind, summary=spec.summary(r),
                           created_at=r.created_at or 0, section=slug)
                for r in records
            )
    except (ApiError, requests.RequestException) as e:
        logger.error("overview: failed to load stats: %s", e, exc_info=True)
        overview.counts = {slug: 0 for slug, _ in OVERVIEW_SECTIONS}
        overview.error = str(e)
        return overview

    recent.sort(key=lambda item: item.created_at, reverse=True)
    overview.recent = recent[:limit]
    return overview

def time_ago(epoch_ms: int, now: Optional[float] = None) -> str:
    now = time.time() if now is None else now
    seconds = max(0.0, now - epoch_ms / 1000)
    minutes = seconds / 60
    if minutes < 1:
        return "just now"
    if minutes < 60:
        return f"{int(minutes)} minutes ago"
    hours = minutes / 60
    if hours < 24:
        return f"{int(hours)} hours ago"
    return f"{int(hours / 24)} days ago"
