from __future__ import annotations
from dataclasses import dataclass, field, fields, asdict
from typing import Any, ClassVar, Dict, List, Optional

SERVER_FIELDS = ("id", "created_at", "updated_at")

@dataclass
class Record:
    """Base for every backend record: server-assigned id and epoch-ms timestamps."""
    id: str = ""
    created_at: int = 0
    updated_at: int = 0

    media_field: ClassVar[Optional[str]] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        data = data or {}
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known and v is not None}
        return cls(**values)

    def payload(self) -> Dict[str, Any]:
        """Body for POST/PUT: the record minus server-assigned fields."""
        body = asdict(self)
        for name in SERVER_FIELDS:
            body.pop(name, None)
        return body

    @property
    def media_url(self) -> str:
        if not self.media_field:
            return ""
        return getattr(self, self.media_field) or ""

@dataclass
class User:
    id: str = ""
    name: str = ""
    email: str = ""
    created_at: int = 0
    updated_at: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "User":
        data = data or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})

@dataclass
class Testimonial(Record):
    name: str = ""
    avatar_url: str = ""
    rating: int = 5
    comment: str = ""
    is_active: bool = True
    order_index: int = 1

    media_field: ClassVar[Optional[str]] = "avatar_url"

@dataclass
class HeroSlide(Record):
    image_url: str = ""
    order_index: int = 1
    is_active: bool = True

    media_field: ClassVar[Optional[str]] = "image_url"

@dataclass
class Gallery(Record):
    title: str = ""
    description: str = ""
    image_url: str = ""
    order_index: int = 1
    is_active: bool = True

    media_field: ClassVar[Optional[str]] = "image_url"

@dataclass
class ContactInfo(Record):
    address: str = ""
    phone: str = ""
    email: str = ""
    visiting_hours: str = ""
    map_embed_url: str = ""

@dataclass
class Activity(Record):
    title: str = ""
    description: str = ""
    time_info: str = ""
    location: str = ""
    order_index: int = 1
    is_active: bool = True

@dataclass
class Facility(Record):
    name: str = ""
    description: str = ""
    image_url: str = ""
    order_index: int = 1
    is_active: bool = True

    media_field: ClassVar[Optional[str]] = "image_url"

@dataclass
class SiteIdentity(Record):
    site_name: str = ""
    logo_url: str = ""
    tagline: str = ""
    primary_button_text: str = ""
    primary_button_link: str = ""
    secondary_button_text: str = ""
    secondary_button_link: str = ""

    media_field: ClassVar[Optional[str]] = "logo_url"

@dataclass
class AboutValue:
    title: str = ""
    value: str = ""
    order_index: int = 1
    id: str = ""
    about_id: str = ""
    created_at: int = 0
    updated_at: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AboutValue":
        data = data or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})

@dataclass
class AboutSection(Record):
    title: str = ""
    description: str = ""
    image_url: str = ""
    is_active: bool = True
    values: List[AboutValue] = field(default_factory=list)

    media_field: ClassVar[Optional[str]] = "image_url"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AboutSection":
        data = dict(data or {})
        raw_values = data.pop("values", None) or []
        section = super().from_dict(data)
        section.values = [AboutValue.from_dict(v) for v in raw_values]
        return section

    def payload(self) -> Dict[str, Any]:
        # values travel without their own server fields
        body = super().payload()
        body["values"] = [
            {"title": v.title, "value": v.value, "order_index": v.order_index}
            for v in self.values
        ]
        return body

@dataclass
class OrganizationMember(Record):
    name: str = ""
    position: str = ""
    position_order: int = 1
    order_index: int = 1
    photo_url: Optional[str] = ""
    description: Optional[str] = ""
    is_active: bool = True

    media_field: ClassVar[Optional[str]] = "photo_url"

@dataclass
class StagedFile:
    """An image picked in a form, held locally until the form is submitted."""
    name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

@dataclass
class UploadResult:
    url: str
    key: str

@dataclass
class RecentItem:
    id: str
    kind: str
    summary: str
    created_at: int
    section: str
