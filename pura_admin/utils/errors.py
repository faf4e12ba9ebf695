import functools, traceback
import streamlit as st
from pura_admin.utils.logging import logger

class PuraAdminError(Exception): ...

class ValidationError(PuraAdminError):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

class ApiError(PuraAdminError):
    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status

class AuthenticationError(PuraAdminError):
    GENERIC_MESSAGE = "Email or password is wrong"

    def __init__(self, message: str = GENERIC_MESSAGE):
        super().__init__(message)
        self.message = message

def error_message(e: BaseException, fallback: str) -> str:
    """Human-readable text for an exception raised by a backend call."""
    text = str(e).strip()
    return text or fallback

def ui_error_boundary(fn):
    @functools.wraps(fn)
    def _wrap(*a, **k):
        try:
            return fn(*a, **k)
        except Exception as e:
            logger.error("UI error in %s: %s", fn.__name__, e, exc_info=True)
            st.error("Unexpected error. See details below.")
            with st.expander("Error details"):
                st.code("".join(traceback.format_exception(type(e), e, e.__traceback__)))
    return _wrap
