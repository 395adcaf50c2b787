import logging
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, File, Form, Query, UploadFile
from fastapi.responses import JSONResponse

from .errors import BadRequest, InternalError, RelayError
from .links import QUERY_PARAM, build_share_link, decode, encode
from .mailer import transport_from_settings
from .relay import parse_payload, submit
from .schemas import ShareLinkCreate, ShareLinkOut, ShareLinkResolved, SubmitFailed, SubmitOk
from .settings import Settings, settings
from .uploads import ensure_upload_dir, store_uploads

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("brief_relay")

app = FastAPI(title="Brief Intake Relay", version="1.0.0")

def get_settings() -> Settings:
    return settings

def get_transport(cfg: Settings = Depends(get_settings)):
    return transport_from_settings(cfg)

def _failure(kind: str, message: str, status_code: int) -> JSONResponse:
    body = SubmitFailed(error=kind, message=message)
    return JSONResponse(body.model_dump(), status_code=status_code)

@app.on_event("startup")
def _startup():
    ensure_upload_dir(settings.upload_dir)

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

@app.post(
    "/api/submit-brief",
    response_model=SubmitOk,
    responses={400: {"model": SubmitFailed}, 413: {"model": SubmitFailed},
               500: {"model": SubmitFailed}, 502: {"model": SubmitFailed}, 504: {"model": SubmitFailed}},
)
def submit_brief(
    form_data: Optional[str] = Form(None, alias="formData"),
    drive_link: Optional[str] = Form(None, alias="driveLink"),
    files: Optional[List[UploadFile]] = File(None),
    cfg: Settings = Depends(get_settings),
    transport=Depends(get_transport),
):
    logger.info("Starting submission: %s", "data received" if form_data else "no data")
    # reject a missing payload before anything is written to disk
    try:
        payload = parse_payload(form_data)
    except BadRequest as e:
        logger.warning("Rejected submission [%s]: %s", e.kind, e)
        return _failure(e.kind, str(e), e.status_code)

    try:
        attachments = store_uploads(files or [], cfg.upload_dir, cfg.max_file_bytes, cfg.max_total_upload_bytes)
    except RelayError as e:
        logger.warning("Rejected submission [%s]: %s", e.kind, e)
        return _failure(e.kind, str(e), e.status_code)
    except OSError as e:
        logger.exception("Could not store uploaded files")
        return _failure(InternalError.kind, f"Could not store uploaded files: {e}", InternalError.status_code)

    destination = (drive_link or "").strip() or None
    result = submit(payload, attachments, destination, cfg, transport)
    if not result.ok:
        return _failure(result.kind, result.message, result.status_code)
    return SubmitOk()

@app.post("/api/share-link", response_model=ShareLinkOut)
def create_share_link(body: ShareLinkCreate, cfg: Settings = Depends(get_settings)):
    reference = body.reference.strip()
    base_url = body.base_url or cfg.public_base_url
    return ShareLinkOut(token=encode(reference), link=build_share_link(base_url, reference))

@app.get("/api/share-link", response_model=ShareLinkResolved)
def resolve_share_link(token: Optional[str] = Query(None, alias=QUERY_PARAM)):
    # an undecodable token means "no folder", never an error
    return ShareLinkResolved(reference=decode(token) or None)

def run() -> None:
    uvicorn.run("brief_relay.main:app", host="0.0.0.0", port=settings.port)
