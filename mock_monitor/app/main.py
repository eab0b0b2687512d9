import time

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
import uvicorn

from .config import settings
from .logging_config import get_logger
from .models import MonitorParams
from .patterns import build_query_key
from .responses import build_prometheus_response, build_targets
from .store import ResponseStore, new_response_store

logger = get_logger(__name__)

MSG_PARSE_FORM_FAILED = "parse query form failed"
MSG_NO_QUERY_PARAM = "no query param"
MSG_NOT_FOUND = "no response value found"
MSG_OK = "ok"

_ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _write(msg: str) -> PlainTextResponse:
    # Every outcome is a 200; callers tell failures apart by the body text.
    return PlainTextResponse(msg, status_code=200)


def _store(request: Request) -> ResponseStore:
    return request.app.state.responses


async def serve_query(request: Request):
    try:
        form = await request.form()
    except Exception as exc:
        logger.warning("query_form_invalid error=%s", exc)
        return _write(MSG_PARSE_FORM_FAILED)
    key = form.get("query")
    if not isinstance(key, str) or not key:
        key = request.query_params.get("query", "")
        if not key:
            return _write(MSG_NO_QUERY_PARAM)
    logger.info("query_received key=%s", key)
    body = _store(request).get(key)
    if body is None:
        logger.info("query_unknown key=%s", key)
        return _write(MSG_NOT_FOUND)
    return _write(body)


def _parse_params(raw: bytes) -> MonitorParams:
    # A JSON null leaves every field at its zero value.
    if raw.strip() == b"null":
        return MonitorParams()
    return MonitorParams.model_validate_json(raw)


async def set_response(request: Request):
    try:
        raw = await request.body()
    except Exception as exc:
        logger.warning("response_body_unreadable error=%s", exc)
        return _write(str(exc))
    try:
        params = _parse_params(raw)
    except ValidationError as exc:
        logger.warning("response_params_invalid error=%s", exc)
        return _write(str(exc))

    if params.timestamp is None:
        params.timestamp = int(time.time())
    try:
        body = build_prometheus_response(params).to_json()
    except Exception as exc:
        logger.warning("response_serialize_failed error=%s", exc)
        return _write(str(exc))

    key = build_query_key(params.member_type, params.query_type, params.duration)
    _store(request).set(key, body)
    logger.info(
        "response_registered key=%s name=%s member_type=%s query_type=%s duration=%s",
        key,
        params.name,
        params.member_type,
        params.query_type,
        params.duration,
    )
    return _write(MSG_OK)


async def serve_targets(_request: Request):
    try:
        body = build_targets().to_json()
    except Exception as exc:
        logger.warning("targets_serialize_failed error=%s", exc)
        return _write(str(exc))
    return _write(body)


def create_app(store: ResponseStore | None = None) -> FastAPI:
    app = FastAPI(title="Mock Monitor")
    app.state.responses = store if store is not None else new_response_store()

    app.add_api_route(settings.query_path, serve_query, methods=_ANY_METHOD)
    app.add_api_route(settings.targets_path, serve_targets, methods=_ANY_METHOD)
    app.add_api_route(settings.response_path, set_response, methods=_ANY_METHOD)

    @app.get("/health")
    async def health():
        responses = app.state.responses
        return {"status": "ok", "responses": len(responses), "keys": sorted(responses.keys())}

    return app


app = create_app()


def run() -> None:
    logger.info(
        "mock_monitor_starting host=%s port=%s query_path=%s targets_path=%s response_path=%s",
        settings.host,
        settings.port,
        settings.query_path,
        settings.targets_path,
        settings.response_path,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
