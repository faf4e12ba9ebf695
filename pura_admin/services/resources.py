"""
Resource catalogue: one ResourceSpec per content type of the public website.

The list and form templates are generic; everything that differs between
testimonials, hero slides, galleries and the rest lives here.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pura_admin.utils.errors import ValidationError
from pura_admin.utils.typing import (
    AboutSection, Activity, ContactInfo, Facility, Gallery, HeroSlide,
    OrganizationMember, Record, SiteIdentity, StagedFile, Testimonial,
)
from pura_admin.utils.validation import validate_email, validate_number, validate_required

# (record, editing, staged_file) -> None, raises ValidationError on the first bad field
Validator = Callable[[Any, bool, Optional[StagedFile]], None]

@dataclass
class FieldSpec:
    name: str
    label: str
    kind: str = "text"  # text | textarea | int | bool | rating
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    placeholder: str = ""

@dataclass
class ResourceSpec:
    slug: str
    label: str
    title: str
    icon: str
    group: str
    api_attr: str
    model: Type[Record]
    fields: List[FieldSpec]
    validate: Validator
    summary: Callable[[Any], str]
    empty_text: str
    media_label: Optional[str] = None
    search_fields: Tuple[str, ...] = ()
    sort_key: Optional[Callable[[Any], Any]] = None
    details: Callable[[Any], List[str]] = field(default=lambda record: [])

    def api(self, client):
        return getattr(client, self.api_attr)

    def blank(self) -> Record:
        return self.model()

    def message(self, action: str) -> str:
        return f"{self.label} {action} successfully"

def _require_image(record: Record, editing: bool, staged: Optional[StagedFile], message: str) -> None:
    if not editing and staged is None and not record.media_url:
        raise ValidationError(message, field="image")

def _validate_testimonial(t: Testimonial, editing: bool, staged: Optional[StagedFile]) -> None:
    validate_required(t.name, "Name")
    validate_number(t.rating, "Rating", 1, 5)
    validate_required(t.comment, "Comment")
    _require_image(t, editing, staged, "Avatar is required for new testimonials")

def _validate_hero_slide(s: HeroSlide, editing: bool, staged: Optional[StagedFile]) -> None:
    _require_image(s, editing, staged, "Image is required for new slides")

def _validate_gallery(g: Gallery, editing: bool, staged: Optional[StagedFile]) -> None:
    validate_required(g.title, "Title")
    _require_image(g, editing, staged, "Image is required for new gallery items")

def _validate_contact_info(c: ContactInfo, editing: bool, staged: Optional[StagedFile]) -> None:
    if c.email:
        validate_email(c.email)

def _validate_activity(a: Activity, editing: bool, staged: Optional[StagedFile]) -> None:
    validate_required(a.title, "Title")

def _validate_facility(f: Facility, editing: bool, staged: Optional[StagedFile]) -> None:
    validate_required(f.name, "Facility Name")
    _require_image(f, editing, staged, "Image is required for new facilities")

def _validate_site_identity(s: SiteIdentity, editing: bool, staged: Optional[StagedFile]) -> None:
    validate_required(s.site_name, "Site Name")
    _require_image(s, editing, staged, "Logo is required for new site identity")
    validate_required(s.primary_button_text, "Primary Button Text")
    validate_required(s.primary_button_link, "Primary Button Link")

def _validate_about(a: AboutSection, editing: bool, staged: Optional[StagedFile]) -> None:
    validate_required(a.title, "Title")
    for i, v in enumerate(a.values, start=1):
        validate_required(v.title, f"Value #{i} title")

def _validate_member(m: OrganizationMember, editing: bool, staged: Optional[StagedFile]) -> None:
    validate_required(m.name, "Name")
    validate_required(m.position, "Position")
    validate_number(m.position_order, "Position Order", 1)

def member_sort_key(m: OrganizationMember):
    return (m.position_order, m.order_index, (m.position or "").lower(), (m.name or "").lower())

def _active_badge(record) -> List[str]:
    return [f"Order: {record.order_index}", "Active" if record.is_active else "Inactive"]

RESOURCES: List[ResourceSpec] = [
    ResourceSpec(
        slug="activities", label="Activity", title="Activities", icon="📅",
        group="Manage Content", api_attr="activities", model=Activity,
        fields=[
            FieldSpec("title", "Title", placeholder="e.g., Odalan"),
            FieldSpec("description", "Description", "textarea"),
            FieldSpec("time_info", "Time", placeholder="e.g., Every full moon, 07:00"),
            FieldSpec("location", "Location"),
            FieldSpec("order_index", "Order", "int", min_value=0),
            FieldSpec("is_active", "Active", "bool"),
        ],
        validate=_validate_activity,
        summary=lambda a: a.title,
        details=lambda a: [a.time_info, a.location] + _active_badge(a),
        empty_text="No activities yet. Create one to get started!",
        search_fields=("title", "description", "location"),
    ),
    ResourceSpec(
        slug="facilities", label="Facility", title="Facilities", icon="🏛️",
        group="Manage Content", api_attr="facilities", model=Facility,
        fields=[
            FieldSpec("name", "Facility Name"),
            FieldSpec("description", "Description", "textarea"),
            FieldSpec("order_index", "Order", "int", min_value=0),
            FieldSpec("is_active", "Active", "bool"),
        ],
        validate=_validate_facility,
        summary=lambda f: f.name,
        details=_active_badge,
        empty_text="No facilities yet. Create one to get started!",
        media_label="Image",
        search_fields=("name", "description"),
    ),
    ResourceSpec(
        slug="gallery", label="Gallery item", title="Gallery", icon="🖼️",
        group="Manage Content", api_attr="galleries", model=Gallery,
        fields=[
            FieldSpec("title", "Title"),
            FieldSpec("description", "Description", "textarea"),
            FieldSpec("order_index", "Order", "int", min_value=0),
            FieldSpec("is_active", "Active", "bool"),
        ],
        validate=_validate_gallery,
        summary=lambda g: g.title,
        details=_active_badge,
        empty_text="No gallery items yet. Create one to get started!",
        media_label="Image",
        search_fields=("title", "description"),
    ),
    ResourceSpec(
        slug="hero-slides", label="Hero slide", title="Hero Slides", icon="🎞️",
        group="Manage Content", api_attr="hero_slides", model=HeroSlide,
        fields=[
            FieldSpec("order_index", "Order", "int", min_value=0),
            FieldSpec("is_active", "Active", "bool"),
        ],
        validate=_validate_hero_slide,
        summary=lambda s: f"Slide (Order: {s.order_index})",
        details=_active_badge,
        empty_text="No hero slides yet. Create one to get started!",
        media_label="Image",
    ),
    ResourceSpec(
        slug="testimonials", label="Testimonial", title="Testimonials", icon="💬",
        group="Manage Content", api_attr="testimonials", model=Testimonial,
        fields=[
            FieldSpec("name", "Name"),
            FieldSpec("rating", "Rating", "rating", min_value=1, max_value=5),
            FieldSpec("comment", "Comment", "textarea"),
            FieldSpec("order_index", "Order", "int", min_value=0),
            FieldSpec("is_active", "Active", "bool"),
        ],
        validate=_validate_testimonial,
        summary=lambda t: t.name,
        details=lambda t: ["⭐" * int(t.rating or 0), t.comment] + _active_badge(t),
        empty_text="No testimonials yet. Create one to get started!",
        media_label="Avatar",
        search_fields=("name", "comment"),
    ),
    ResourceSpec(
        slug="about", label="About section", title="About", icon="ℹ️",
        group="Configuration", api_attr="about", model=AboutSection,
        fields=[
            FieldSpec("title", "Title"),
            FieldSpec("description", "Description", "textarea"),
            FieldSpec("is_active", "Active", "bool"),
        ],
        validate=_validate_about,
        summary=lambda a: a.title,
        details=lambda a: [f"{len(a.values)} value(s)", "Active" if a.is_active else "Inactive"],
        empty_text="No about sections yet. Create one to get started!",
        media_label="Image",
        search_fields=("title", "description"),
    ),
    ResourceSpec(
        slug="contact-info", label="Contact info", title="Contact Info", icon="📍",
        group="Configuration", api_attr="contact_info", model=ContactInfo,
        fields=[
            FieldSpec("address", "Address", "textarea"),
            FieldSpec("phone", "Phone"),
            FieldSpec("email", "Email", placeholder="info@example.com"),
            FieldSpec("visiting_hours", "Visiting Hours"),
            FieldSpec("map_embed_url", "Map Embed URL"),
        ],
        validate=_validate_contact_info,
        summary=lambda c: c.address,
        details=lambda c: [c.phone, c.email, c.visiting_hours],
        empty_text="No contact information yet. Create one to get started!",
        search_fields=("address", "phone", "email"),
    ),
    ResourceSpec(
        slug="organization", label="Organization member", title="Organization", icon="👥",
        group="Configuration", api_attr="organization_members", model=OrganizationMember,
        fields=[
            FieldSpec("name", "Name"),
            FieldSpec("position", "Position"),
            FieldSpec("position_order", "Position Order", "int", min_value=1),
            FieldSpec("order_index", "Order", "int", min_value=0),
            FieldSpec("description", "Description", "textarea"),
            FieldSpec("is_active", "Active", "bool"),
        ],
        validate=_validate_member,
        summary=lambda m: f"{m.name} · {m.position}",
        details=lambda m: [m.description or ""] + _active_badge(m),
        empty_text="No organization members yet. Create one to get started!",
        media_label="Photo",
        search_fields=("name", "position"),
        sort_key=member_sort_key,
    ),
    ResourceSpec(
        slug="site-identity", label="Site identity", title="Site Identity", icon="⚙️",
        group="Configuration", api_attr="site_identity", model=SiteIdentity,
        fields=[
            FieldSpec("site_name", "Site Name"),
            FieldSpec("tagline", "Tagline"),
            FieldSpec("primary_button_text", "Primary Button Text"),
            FieldSpec("primary_button_link", "Primary Button Link"),
            FieldSpec("secondary_button_text", "Secondary Button Text"),
            FieldSpec("secondary_button_link", "Secondary Button Link"),
        ],
        validate=_validate_site_identity,
        summary=lambda s: s.site_name,
        details=lambda s: [s.tagline],
        empty_text="No site identity configured yet. Create one to get started!",
        media_label="Logo",
    ),
]

BY_SLUG: Dict[str, ResourceSpec] = {r.slug: r for r in RESOURCES}

def get_resource(slug: str) -> ResourceSpec:
    try:
        return BY_SLUG[slug]
    except KeyError:
        raise KeyError(f"Unknown resource section: {slug}") from None

# Sections counted on the overview page, with the label used in "recent activity"
OVERVIEW_SECTIONS = [
    ("testimonials", "Testimonial"),
    ("hero-slides", "Hero Slide"),
    ("gallery", "Gallery Item"),
    ("activities", "Activity"),
    ("facilities", "Facility"),
]
