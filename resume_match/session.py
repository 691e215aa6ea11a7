"""
HTTP client for the external session / resume version-history service.

The session id is held by an explicit `SessionContext` that the caller owns
and passes to every call:

    ctx = SessionContext()
    store = ResumeStore()
    store.ensure_session(ctx)          # create, or verify an existing id
    store.save_resume(ctx, resume)     # use
    ctx.clear()                        # forget

Only session creation raises (`SessionError`); read/update helpers log the
failure and return None / False / [] so the editor keeps working offline.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, ValidationError

from . import config
from .models import ResumeJson
from .logger import get_logger

logger = get_logger(__name__)


class SessionError(RuntimeError):
    """The session service could not create a session."""


class SessionContext(BaseModel):
    session_id: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.session_id)

    def clear(self) -> None:
        self.session_id = None


class SessionData(BaseModel):
    id: str
    created_at: str
    last_accessed: str
    metadata: Optional[Dict[str, Any]] = None


class ResumeRecord(BaseModel):
    id: str
    version: int
    title: str = ""
    content: Any = None
    original_filename: Optional[str] = None
    job_description: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
    is_current: Optional[bool] = None


class ResumeVersion(BaseModel):
    id: str
    version: int
    title: str = ""
    created_at: str = ""
    updated_at: str = ""
    is_current: bool = False


def _resume_payload(resume: Any) -> Any:
    if isinstance(resume, BaseModel):
        return resume.model_dump()
    return resume


class ResumeStore:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.RESUME_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.RESUME_API_TIMEOUT_S
        self.http = http or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_json(self, path: str) -> Optional[Any]:
        """GET -> decoded JSON, or None on any transport/HTTP/decoding failure."""
        try:
            r = self.http.get(self._url(path), timeout=self.timeout)
            if not r.ok:
                logger.warning("GET %s -> HTTP %s", path, r.status_code)
                return None
            return r.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("GET %s failed: %s", path, e)
            return None

    # ------------------------------------------------------------ sessions

    def verify_session(self, ctx: SessionContext) -> bool:
        if not ctx.is_active:
            return False
        try:
            r = self.http.get(self._url(f"/sessions/{ctx.session_id}"), timeout=self.timeout)
            return bool(r.ok)
        except requests.RequestException as e:
            logger.warning("Failed to verify existing session %s: %s", ctx.session_id, e)
            return False

    def create_session(self, ctx: SessionContext, metadata: Optional[Dict[str, Any]] = None) -> str:
        body = {"metadata": metadata or {"created_from": "web_app"}}
        try:
            r = self.http.post(self._url("/sessions"), json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Error creating session: %s", e)
            raise SessionError("Failed to create session") from e
        if not r.ok:
            logger.error("Error creating session: HTTP %s", r.status_code)
            raise SessionError("Failed to create session")
        try:
            session_id = (r.json() or {}).get("session_id")
        except ValueError as e:
            raise SessionError("Session service returned invalid JSON") from e
        if not session_id:
            raise SessionError("Session service returned no session_id")
        ctx.session_id = str(session_id)
        logger.info("Created session %s", ctx.session_id)
        return ctx.session_id

    def ensure_session(self, ctx: SessionContext, metadata: Optional[Dict[str, Any]] = None) -> str:
        """Reuse ctx's session when the service still knows it, else create one."""
        if self.verify_session(ctx):
            return ctx.session_id
        return self.create_session(ctx, metadata)

    def get_session_data(self, ctx: SessionContext) -> Optional[SessionData]:
        if not ctx.is_active:
            return None
        data = self._get_json(f"/sessions/{ctx.session_id}")
        if data is None:
            return None
        try:
            return SessionData.model_validate(data)
        except ValidationError as e:
            logger.error("Unexpected session payload: %s", e)
            return None

    # ------------------------------------------------------------ resumes

    def save_resume(
        self,
        ctx: SessionContext,
        resume: ResumeJson | Dict[str, Any],
        job_description: Optional[str] = None,
    ) -> Optional[str]:
        """Store a new version; returns its resume_id, or None on failure."""
        session_id = self.ensure_session(ctx)
        body = {
            "session_id": session_id,
            "resume_data": _resume_payload(resume),
            "job_description": job_description,
        }
        try:
            r = self.http.post(self._url("/resumes"), json=body, timeout=self.timeout)
            if not r.ok:
                logger.error("Error saving resume: HTTP %s", r.status_code)
                return None
            return (r.json() or {}).get("resume_id")
        except (requests.RequestException, ValueError) as e:
            logger.error("Error saving resume: %s", e)
            return None

    def get_current_resume(self, ctx: SessionContext) -> Optional[ResumeRecord]:
        if not ctx.is_active:
            return None
        data = self._get_json(f"/sessions/{ctx.session_id}/current-resume")
        return _validate_record(data)

    def get_resume_history(self, ctx: SessionContext) -> List[ResumeVersion]:
        if not ctx.is_active:
            return []
        data = self._get_json(f"/sessions/{ctx.session_id}/resumes")
        if not isinstance(data, list):
            return []
        out: List[ResumeVersion] = []
        for item in data:
            try:
                out.append(ResumeVersion.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed version entry: %s", e)
        return out

    def get_resume(self, resume_id: str) -> Optional[ResumeRecord]:
        return _validate_record(self._get_json(f"/resumes/{resume_id}"))

    def update_resume(self, resume_id: str, resume: ResumeJson | Dict[str, Any]) -> bool:
        body = {"resume_id": resume_id, "resume_data": _resume_payload(resume)}
        try:
            r = self.http.put(self._url(f"/resumes/{resume_id}"), json=body, timeout=self.timeout)
            return bool(r.ok)
        except requests.RequestException as e:
            logger.error("Error updating resume %s: %s", resume_id, e)
            return False

    def restore_version(self, ctx: SessionContext, resume_id: str) -> bool:
        if not ctx.is_active:
            return False
        try:
            r = self.http.post(
                self._url(f"/sessions/{ctx.session_id}/restore/{resume_id}"),
                timeout=self.timeout,
            )
            return bool(r.ok)
        except requests.RequestException as e:
            logger.error("Error restoring resume version %s: %s", resume_id, e)
            return False

    def delete_resume(self, resume_id: str) -> bool:
        try:
            r = self.http.delete(self._url(f"/resumes/{resume_id}"), timeout=self.timeout)
            return bool(r.ok)
        except requests.RequestException as e:
            logger.error("Error deleting resume %s: %s", resume_id, e)
            return False


def _validate_record(data: Any) -> Optional[ResumeRecord]:
    if data is None:
        return None
    try:
        return ResumeRecord.model_validate(data)
    except ValidationError as e:
        logger.error("Unexpected resume payload: %s", e)
        return None
