from __future__ import annotations
from dataclasses import dataclass
from typing import List

import streamlit as st

from pura_admin.utils.logging import logger

@dataclass
class Notice:
    level: str  # success | error | warning
    title: str
    message: str = ""

class Notifier:
    """
    Queue of user-facing notifications.

    Controllers push notices while handling an action; the page flushes them on
    the next render, so a notice survives the st.rerun() that follows a save.
    """

    def __init__(self):
        self.pending: List[Notice] = []

    def _push(self, level: str, title: str, message: str = "") -> None:
        logger.debug("notify[%s]: %s %s", level, title, message)
        self.pending.append(Notice(level, title, message))

    def success(self, title: str, message: str = "") -> None:
        self._push("success", title, message)

    def error(self, title: str, message: str = "") -> None:
        self._push("error", title, message)

    def warning(self, title: str, message: str = "") -> None:
        self._push("warning", title, message)

    def drain(self) -> List[Notice]:
        notices, self.pending = self.pending, []
        return notices

_ICONS = {"success": "✅", "error": "❌", "warning": "⚠️"}

def render(notifier: Notifier) -> None:
    for n in notifier.drain():
        text = f"**{n.title}**" + (f": {n.message}" if n.message else "")
        st.toast(text, icon=_ICONS.get(n.level))
        if n.level == "error":
            st.error(text)
        elif n.level == "warning":
            st.warning(text)
