"""
HTTP client for the website backend.

Authentication is cookie based: the backend sets an HttpOnly session cookie on
login and the requests.Session cookie jar sends it back on every call. The
dashboard never reads or stores the token itself.
"""
from __future__ import annotations
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

import requests

from pura_admin.utils.errors import ApiError
from pura_admin.utils.logging import logger
from pura_admin.utils.typing import (
    AboutSection, Activity, ContactInfo, Facility, Gallery, HeroSlide,
    OrganizationMember, Record, SiteIdentity, StagedFile, Testimonial,
    UploadResult, User,
)

R = TypeVar("R", bound=Record)

def _error_from(resp: requests.Response, prefix: str, method: str, url: str) -> ApiError:
    try:
        body = resp.json()
    except ValueError:
        body = {}
    message = body.get("errors") if isinstance(body, dict) else None
    if not message:
        message = f"{prefix}: {resp.status_code}"
    logger.warning("api: %s %s -> %s (%s)", method, url, resp.status_code, message)
    return ApiError(str(message), status=resp.status_code)


class ApiClient:
    """Single point of contact with the backend REST API."""

    def __init__(self, base_url: str = "", timeout: Optional[float] = 30.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.auth = AuthApi(self)
        self.storage = StorageApi(self)
        self.testimonials = ResourceApi(self, "testimonials", Testimonial)
        self.hero_slides = ResourceApi(self, "hero-slides", HeroSlide)
        self.galleries = ResourceApi(self, "galleries", Gallery)
        self.contact_info = ResourceApi(self, "contact-info", ContactInfo)
        self.activities = ResourceApi(self, "activities", Activity)
        self.facilities = ResourceApi(self, "facilities", Facility)
        self.site_identity = ResourceApi(self, "site-identity", SiteIdentity)
        self.about = ResourceApi(self, "about", AboutSection)
        self.organization_members = ResourceApi(self, "organization-members", OrganizationMember)

    def url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def request(self, method: str, endpoint: str, *, json: Any = None,
                params: Optional[Dict[str, Any]] = None) -> Any:
        """Send one request and return the envelope's ``data`` payload.

        Non-2xx responses raise ApiError with the envelope's ``errors`` text, or
        "API Error: <status>" when there is none. Transport failures
        (requests.RequestException) propagate unchanged, as does a malformed
        JSON body on a successful response.
        """
        url = self.url(endpoint)
        logger.debug("api: %s %s", method, url)
        resp = self.session.request(
            method, url, json=json, params=params, timeout=self.timeout,
        )
        if not resp.ok:
            raise _error_from(resp, "API Error", method, url)
        if resp.status_code == 204 or not resp.content:
            return None
        body = resp.json()
        if not isinstance(body, dict):
            return None
        return body.get("data")

    def get(self, endpoint: str, **kw) -> Any:
        return self.request("GET", endpoint, **kw)

    def post(self, endpoint: str, **kw) -> Any:
        return self.request("POST", endpoint, **kw)

    def put(self, endpoint: str, **kw) -> Any:
        return self.request("PUT", endpoint, **kw)

    def patch(self, endpoint: str, **kw) -> Any:
        return self.request("PATCH", endpoint, **kw)

    def delete(self, endpoint: str, **kw) -> Any:
        return self.request("DELETE", endpoint, **kw)

    def close(self) -> None:
        self.session.close()


class AuthApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str, recaptcha_token: str) -> User:
        data = self.client.post("/api/users/_login", json={
            "email": email, "password": password, "recaptcha_token": recaptcha_token,
        })
        return User.from_dict(data)

    def logout(self) -> None:
        self.client.post("/api/users/_logout")

    def current_user(self) -> User:
        data = self.client.get("/api/users/_current")
        if not data:
            raise ApiError("No active session", status=401)
        return User.from_dict(data)

    def update_profile(self, name: Optional[str] = None, password: Optional[str] = None) -> User:
        body = {k: v for k, v in (("name", name), ("password", password)) if v is not None}
        return User.from_dict(self.client.patch("/api/users/_current", json=body))


class ResourceApi(Generic[R]):
    """REST collection ``/api/<path>`` mapped onto one Record dataclass."""

    def __init__(self, client: ApiClient, path: str, model: Type[R]):
        self.client = client
        self.path = path
        self.model = model

    @property
    def endpoint(self) -> str:
        return f"/api/{self.path}"

    def get_all(self) -> List[R]:
        data = self.client.get(self.endpoint)
        return [self.model.from_dict(item) for item in (data or [])]

    def get_by_id(self, record_id: str) -> R:
        data = self.client.get(f"{self.endpoint}/{record_id}")
        if data is None:
            raise ApiError(f"{self.path} {record_id} not found", status=404)
        return self.model.from_dict(data)

    def create(self, data: Union[R, Dict[str, Any]]) -> R:
        body = data.payload() if isinstance(data, Record) else data
        return self.model.from_dict(self.client.post(self.endpoint, json=body))

    def update(self, record_id: str, data: Union[R, Dict[str, Any]]) -> R:
        body = data.payload() if isinstance(data, Record) else data
        return self.model.from_dict(self.client.put(f"{self.endpoint}/{record_id}", json=body))

    def delete(self, record_id: str) -> None:
        self.client.delete(f"{self.endpoint}/{record_id}")


class StorageApi:
    """Object storage behind the backend: upload, delete, presigned URLs."""

    def __init__(self, client: ApiClient):
        self.client = client

    def upload(self, file: StagedFile) -> UploadResult:
        files = {"file": (file.name, file.data, file.content_type)}
        url = self.client.url("/api/storage/upload")
        resp = self.client.session.post(url, files=files, timeout=self.client.timeout)
        if not resp.ok:
            raise _error_from(resp, "Upload failed", "POST", url)
        body = resp.json()
        data = (body.get("data") or body) if isinstance(body, dict) else {}
        result = UploadResult(url=data.get("url", ""), key=data.get("key", ""))
        logger.info("storage: uploaded %s as %s", file.name, result.key or result.url)
        return result

    def delete(self, key: str) -> None:
        self.client.delete("/api/storage/delete", params={"key": key})
        logger.info("storage: deleted %s", key)

    def presigned_url(self, key: str, expiration: Optional[int] = None) -> str:
        params: Dict[str, Any] = {"key": key}
        if expiration:
            params["expiration"] = expiration
        return self.client.get("/api/storage/presigned-url", params=params)
