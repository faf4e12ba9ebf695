"""
List and form controllers shared by every content section.

They hold no Streamlit state of their own: components/resource_list.py and
components/resource_form.py render them and forward user actions.
"""
from __future__ import annotations
import math
from typing import Any, Callable, List, Optional, Tuple

import requests

from pura_admin.services.api_client import ApiClient
from pura_admin.services.media import ImageReplacer
from pura_admin.services.resources import ResourceSpec
from pura_admin.utils.errors import ApiError, ValidationError, error_message
from pura_admin.utils.logging import logger
from pura_admin.utils.notify import Notifier
from pura_admin.utils.typing import AboutSection, AboutValue, Record, StagedFile
from pura_admin.utils.validation import validate_file

BackendError = (ApiError, requests.RequestException)

class FormController:
    """Create-or-edit state for one record. ``record_id`` None means create mode."""

    def __init__(self, spec: ResourceSpec, client: ApiClient, replacer: ImageReplacer,
                 notifier: Notifier, record_id: Optional[str] = None,
                 on_close: Optional[Callable[[], None]] = None, max_upload_mb: float = 2):
        self.spec = spec
        self.api = spec.api(client)
        self.replacer = replacer
        self.notifier = notifier
        self.record_id = record_id
        self.on_close = on_close
        self.max_upload_mb = max_upload_mb

        self.record: Record = spec.blank()
        self.old_media_url = ""
        self.staged: Optional[StagedFile] = None
        self.error = ""
        self.loading = False
        self.loaded = record_id is None
        self.alive = True

    @property
    def editing(self) -> bool:
        return self.record_id is not None

    def load(self) -> None:
        if not self.editing:
            return
        self.loading = True
        try:
            record = self.api.get_by_id(self.record_id)
        except BackendError as e:
            logger.error("%s: load %s failed: %s", self.spec.slug, self.record_id, e)
            if self.alive:
                self.error = f"Failed to load {self.spec.label.lower()}"
            return
        finally:
            self.loading = False
        if not self.alive:
            return
        self.record = record
        self.old_media_url = record.media_url
        self.loaded = True

    def set_field(self, name: str, value: Any) -> None:
        setattr(self.record, name, value)

    def stage_file(self, file: StagedFile) -> bool:
        """Validate and keep ``file`` until submit; nothing goes over the network here."""
        try:
            validate_file(file, self.spec.media_label or "Image", self.max_upload_mb)
        except ValidationError as e:
            self.error = e.message
            return False
        self.staged = file
        self.error = ""
        return True

    def clear_staged(self) -> None:
        self.staged = None

    # about section values, submitted inside the section payload

    @property
    def values(self) -> List[AboutValue]:
        if not isinstance(self.record, AboutSection):
            raise TypeError(f"{self.spec.slug} records have no values")
        return self.record.values

    def add_value(self) -> None:
        self.values.append(AboutValue(order_index=len(self.values) + 1))

    def update_value(self, index: int, field: str, value: Any) -> None:
        if field not in ("title", "value", "order_index"):
            raise ValueError(f"Unknown value field: {field}")
        setattr(self.values[index], field, value)

    def remove_value(self, index: int) -> None:
        del self.values[index]

    def validate(self) -> bool:
        try:
            self.spec.validate(self.record, self.editing, self.staged)
        except ValidationError as e:
            self.error = e.message
            return False
        return True

    def submit(self) -> bool:
        """Validate, upload a staged image (retiring the old one), then save.

        Returns True when the record was saved and the form closed.
        """
        self.error = ""
        if not self.validate():
            return False

        self.loading = True
        try:
            if self.staged is not None:
                self._upload_staged()
            if self.editing:
                self.api.update(self.record_id, self.record)
                message = self.spec.message("updated")
            else:
                self.api.create(self.record)
                message = self.spec.message("created")
        except BackendError as e:
            message = error_message(e, f"Failed to save {self.spec.label.lower()}")
            logger.error("%s: save failed: %s", self.spec.slug, message)
            if self.alive:
                self.error = message
                self.notifier.error("Error", message)
            return False
        finally:
            self.loading = False

        logger.info("%s: %s", self.spec.slug, message)
        self.notifier.success("Success", message)
        self.close()
        return True

    def _upload_staged(self) -> None:
        # an image uploaded by an earlier failed attempt is replaceable too
        outcome = self.replacer.replace(
            self.staged, old_url=self.old_media_url,
            editing=self.editing or bool(self.old_media_url),
        )
        self.set_field(self.spec.model.media_field, outcome.upload.url)
        self.old_media_url = outcome.upload.url
        self.staged = None
        if outcome.cleanup_error:
            self.notifier.warning("Old image not removed", outcome.cleanup_error)

    def close(self) -> None:
        if self.alive and self.on_close is not None:
            self.on_close()

    def dispose(self) -> None:
        self.alive = False


class ListController:
    """All records of one resource, plus the delete confirmation and form switch."""

    def __init__(self, spec: ResourceSpec, client: ApiClient, replacer: ImageReplacer,
                 notifier: Notifier, page_size: int = 9, max_upload_mb: float = 2):
        self.spec = spec
        self.client = client
        self.api = spec.api(client)
        self.replacer = replacer
        self.notifier = notifier
        self.page_size = page_size
        self.max_upload_mb = max_upload_mb

        self.items: List[Record] = []
        self.loading = False
        self.error = ""
        self.pending_delete: Optional[str] = None
        self.search = ""
        self.page = 1
        self.form: Optional[FormController] = None

    def mount(self) -> None:
        """Entering the section: drop any half-finished form and fetch fresh."""
        if self.form is not None:
            self.form.dispose()
            self.form = None
        self.pending_delete = None
        self.refresh()

    def refresh(self) -> None:
        self.loading = True
        try:
            items = self.api.get_all()
        except BackendError as e:
            logger.error("%s: fetch failed: %s", self.spec.slug, e)
            self.error = f"Failed to fetch {self.spec.title.lower()}: {error_message(e, 'unknown error')}"
            return
        finally:
            self.loading = False
        if self.spec.sort_key is not None:
            items = sorted(items, key=self.spec.sort_key)
        self.items = items
        self.error = ""
        self.set_page(self.page)
        logger.debug("%s: %d record(s)", self.spec.slug, len(items))

    def find(self, record_id: str) -> Optional[Record]:
        return next((r for r in self.items if r.id == record_id), None)

    # search + pagination

    def filtered(self) -> List[Record]:
        term = self.search.strip().lower()
        if not term or not self.spec.search_fields:
            return list(self.items)
        return [
            r for r in self.items
            if any(term in str(getattr(r, f, "") or "").lower() for f in self.spec.search_fields)
        ]

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(len(self.filtered()) / self.page_size))

    def set_search(self, term: str) -> None:
        if term != self.search:
            self.search = term
            self.page = 1

    def set_page(self, page: int) -> None:
        self.page = min(max(1, page), self.total_pages)

    def visible(self) -> Tuple[List[Record], int]:
        rows = self.filtered()
        start = (self.page - 1) * self.page_size
        return rows[start:start + self.page_size], self.total_pages

    # delete with confirmation

    def request_delete(self, record_id: str) -> None:
        self.pending_delete = record_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> bool:
        record_id, self.pending_delete = self.pending_delete, None
        if record_id is None:
            return False
        record = self.find(record_id)
        try:
            if record is not None and record.media_url:
                self.replacer.discard(record.media_url)
            self.api.delete(record_id)
        except BackendError as e:
            message = error_message(e, f"Failed to delete {self.spec.label.lower()}")
            logger.error("%s: delete %s failed: %s", self.spec.slug, record_id, message)
            self.notifier.error("Error", message)
            return False
        self.items = [r for r in self.items if r.id != record_id]
        self.set_page(self.page)
        logger.info("%s: deleted %s", self.spec.slug, record_id)
        self.notifier.success("Success", self.spec.message("deleted"))
        return True

    # form switching

    @property
    def showing_form(self) -> bool:
        return self.form is not None

    def _open_form(self, record_id: Optional[str]) -> FormController:
        if self.form is not None:
            self.form.dispose()
        self.form = FormController(
            self.spec, self.client, self.replacer, self.notifier,
            record_id=record_id, on_close=self.close_form, max_upload_mb=self.max_upload_mb,
        )
        return self.form

    def start_create(self) -> FormController:
        return self._open_form(None)

    def start_edit(self, record_id: str) -> FormController:
        form = self._open_form(record_id)
        form.load()
        return form

    def close_form(self) -> None:
        if self.form is not None:
            self.form.dispose()
        self.form = None
        self.refresh()
