from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

import streamlit as st

from pura_admin.services.api_client import ApiClient
from pura_admin.services.auth import AuthController
from pura_admin.services.config import Settings, get_settings
from pura_admin.services.crud import ListController
from pura_admin.services.media import ImageReplacer
from pura_admin.services.resources import get_resource
from pura_admin.utils.logging import logger
from pura_admin.utils.notify import Notifier

CTX_KEY = "ctx"

@dataclass
class AppContext:
    """Everything one browser session needs, built once and passed to the views."""
    settings: Settings
    client: ApiClient
    auth: AuthController
    notifier: Notifier
    replacer: ImageReplacer
    lists: Dict[str, ListController] = field(default_factory=dict)

    def list_controller(self, slug: str) -> ListController:
        if slug not in self.lists:
            self.lists[slug] = ListController(
                get_resource(slug), self.client, self.replacer, self.notifier,
                page_size=self.settings.page_size, max_upload_mb=self.settings.max_upload_mb,
            )
        return self.lists[slug]

def build_context(settings: Settings, client: ApiClient | None = None) -> AppContext:
    client = client or ApiClient(settings.api_url, timeout=settings.request_timeout)
    return AppContext(
        settings=settings,
        client=client,
        auth=AuthController(client),
        notifier=Notifier(),
        replacer=ImageReplacer(client.storage, key_prefix=settings.storage_key_prefix),
    )

def initialize() -> AppContext:
    if CTX_KEY in st.session_state:
        return st.session_state[CTX_KEY]
    logger.info("Initializing dashboard session")

    st.session_state.setdefault("current_view", "overview")
    ctx = build_context(get_settings())
    st.session_state[CTX_KEY] = ctx
    ctx.auth.bootstrap()
    return ctx

def teardown() -> None:
    ctx = st.session_state.pop(CTX_KEY, None)
    if ctx is not None:
        ctx.auth.teardown()
        logger.info("Dashboard session torn down")
