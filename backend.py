# backend.py — Flask JSON API: text -> parse -> match, plus version history proxy
from flask import Flask, jsonify, request, session
from pydantic import ValidationError
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.utils import secure_filename
import os

from resume_match import config
from resume_match.keywords import extract_keywords
from resume_match.logger import get_logger, setup_logging
from resume_match.matcher import match_job_description
from resume_match.models import ResumeJson
from resume_match.parser import parse_resume_text
from resume_match.reconcile import analyze
from resume_match.session import ResumeStore, SessionContext, SessionError

setup_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = get_logger(__name__)

SESSION_KEY = "resume_session_id"

app = Flask(__name__)
app.config.update(
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE="Lax",
    SESSION_COOKIE_SECURE=config.COOKIE_SECURE,
    MAX_CONTENT_LENGTH=config.MAX_UPLOAD_BYTES,
)
app.secret_key = config.SECRET_KEY

store = ResumeStore()


class InvalidRequest(Exception):
    pass


def allowed_file(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in config.ALLOWED_EXTS


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidRequest("Expected a JSON object body")
    return data


def text_field(data: dict, key: str) -> str:
    val = data.get(key, "")
    if val is None:
        return ""
    if not isinstance(val, str):
        raise InvalidRequest(f"'{key}' must be a string")
    return val


def resume_field(data: dict, key: str = "resume", required: bool = True):
    raw = data.get(key)
    if raw is None:
        if required:
            raise InvalidRequest(f"'{key}' is required")
        return None
    return ResumeJson.model_validate(raw)


def current_context() -> SessionContext:
    return SessionContext(session_id=session.get(SESSION_KEY))


def remember(ctx: SessionContext) -> None:
    if ctx.is_active:
        session[SESSION_KEY] = ctx.session_id
    else:
        session.pop(SESSION_KEY, None)


@app.errorhandler(InvalidRequest)
def handle_bad_request(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(ValidationError)
def handle_validation_error(e):
    details = e.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"error": "Invalid resume payload", "details": details}), 400


@app.errorhandler(RequestEntityTooLarge)
def handle_too_large(e):
    return jsonify({"error": "File too large"}), 413


@app.errorhandler(SessionError)
def handle_session_error(e):
    logger.error("Session service unavailable: %s", e)
    return jsonify({"error": "Session service unavailable"}), 502


# ---------------------------------------------------------------- analysis


@app.post("/api/parse")
def api_parse():
    data = json_body()
    resume = parse_resume_text(text_field(data, "text"))
    return jsonify(resume.model_dump())


@app.post("/api/match")
def api_match():
    data = json_body()
    resume = resume_field(data)
    result = match_job_description(text_field(data, "job_description"), resume)
    return jsonify(result.model_dump(by_alias=True))


@app.post("/api/analyze")
def api_analyze():
    data = json_body()
    text = text_field(data, "text")
    if not text.strip():
        raise InvalidRequest("Upload or paste a resume first.")
    result = analyze(
        text,
        text_field(data, "job_description"),
        previous=resume_field(data, required=False),
    )
    return jsonify(result.model_dump(by_alias=True))


@app.post("/api/keywords")
def api_keywords():
    data = json_body()
    return jsonify({"keywords": extract_keywords(text_field(data, "text"))})


@app.post("/api/upload")
def api_upload():
    f = request.files.get("file")
    if not f or not f.filename:
        raise InvalidRequest("No file")

    safe_name = secure_filename(f.filename)
    if not allowed_file(safe_name):
        ext = os.path.splitext(safe_name)[1].lower() or "(none)"
        raise InvalidRequest(f"Unsupported file type: {ext}")

    text = f.read().decode("utf-8", errors="replace")
    return jsonify({"filename": safe_name, "text": text})


# ---------------------------------------------------------------- versions


@app.post("/api/resumes")
def api_save_resume():
    data = json_body()
    resume = resume_field(data)
    ctx = current_context()
    resume_id = store.save_resume(ctx, resume, data.get("job_description"))
    remember(ctx)
    if not resume_id:
        return jsonify({"error": "Failed to save resume"}), 502
    return jsonify({"resume_id": resume_id, "session_id": ctx.session_id}), 201


@app.get("/api/resumes")
def api_resume_history():
    versions = store.get_resume_history(current_context())
    return jsonify([v.model_dump() for v in versions])


@app.get("/api/resumes/current")
def api_current_resume():
    rec = store.get_current_resume(current_context())
    if rec is None:
        return jsonify({"error": "No current resume"}), 404
    return jsonify(rec.model_dump())


@app.get("/api/resumes/<resume_id>")
def api_get_resume(resume_id):
    rec = store.get_resume(resume_id)
    if rec is None:
        return jsonify({"error": "Resume not found"}), 404
    return jsonify(rec.model_dump())


@app.put("/api/resumes/<resume_id>")
def api_update_resume(resume_id):
    resume = resume_field(json_body())
    if not store.update_resume(resume_id, resume):
        return jsonify({"error": "Failed to update resume"}), 502
    return jsonify({"ok": True})


@app.post("/api/resumes/<resume_id>/restore")
def api_restore_resume(resume_id):
    if not store.restore_version(current_context(), resume_id):
        return jsonify({"error": "Failed to restore version"}), 502
    return jsonify({"ok": True})


@app.delete("/api/resumes/<resume_id>")
def api_delete_resume(resume_id):
    if not store.delete_resume(resume_id):
        return jsonify({"error": "Failed to delete resume"}), 502
    return jsonify({"ok": True})


@app.post("/api/session/clear")
def api_clear_session():
    ctx = current_context()
    ctx.clear()
    remember(ctx)
    return jsonify({"ok": True})


@app.get("/healthz")
def healthz():
    return "ok", 200


if __name__ == "__main__":
    app.run(debug=False)
