from __future__ import annotations
from typing import Optional

import requests

from pura_admin.services.api_client import ApiClient
from pura_admin.utils.errors import ApiError, AuthenticationError, ValidationError
from pura_admin.utils.logging import logger
from pura_admin.utils.typing import User

PROFILE_PASSWORD_MIN = 8

class AuthController:
    """
    Authentication state for one browser session.

    Created once by app.state.initialize() and handed to the shell, the sidebar
    and the profile view. ``loading`` starts True until bootstrap() has asked
    the backend whether the session cookie is still valid.
    """

    def __init__(self, client: ApiClient):
        self.client = client
        self.user: Optional[User] = None
        self.loading = True
        self._bootstrapped = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def bootstrap(self) -> None:
        if self._bootstrapped:
            return
        self._bootstrapped = True
        try:
            self.user = self.client.auth.current_user()
            logger.info("auth: resumed session for %s", self.user.email)
        except (ApiError, requests.RequestException) as e:
            logger.info("auth: no active session (%s)", e)
            self.user = None
        finally:
            self.loading = False

    def login(self, email: str, password: str, captcha_token: str) -> User:
        self.loading = True
        try:
            try:
                self.client.auth.login(email, password, captcha_token)
            except ApiError as e:
                logger.warning("auth: login rejected for %s: %s", email, e)
                raise AuthenticationError() from e
            self.user = self.client.auth.current_user()
            logger.info("auth: logged in as %s", self.user.email)
            return self.user
        finally:
            self.loading = False

    def logout(self) -> None:
        self.loading = True
        try:
            self.client.auth.logout()
            logger.info("auth: logged out %s", self.user.email if self.user else "-")
            self.user = None
        finally:
            self.loading = False

    def update_password(self, password: str, confirm: str) -> None:
        if password != confirm:
            raise ValidationError("Passwords do not match.", field="password")
        if len(password) < PROFILE_PASSWORD_MIN:
            raise ValidationError(
                f"Password must be at least {PROFILE_PASSWORD_MIN} characters long.", field="password")
        self.loading = True
        try:
            updated = self.client.auth.update_profile(password=password)
            if updated.email:
                self.user = updated
            logger.info("auth: password updated")
        finally:
            self.loading = False

    def teardown(self) -> None:
        self.user = None
        self.loading = False
        self.client.close()
