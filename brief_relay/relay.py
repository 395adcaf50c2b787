import json, logging, mimetypes
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from html import escape
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .errors import BadRequest, ConfigurationError, InternalError, PayloadTooLarge, RelayError
from .labels import NAME_QUESTION, PLACEHOLDER, label_for
from .settings import Settings
from .uploads import Attachment, discard

logger = logging.getLogger(__name__)

SENDER_NAME = "Transition Brief Form"
BRAND_COLOR = "#a22675"
BRAND_TINT = "#fdf2f8"
BORDER = "1px solid #e2e8f0"

@dataclass(frozen=True)
class SummaryRow:
    index: int
    label: str
    value: str

@dataclass(frozen=True)
class MailCredentials:
    user: str
    password: str
    recipient: str

@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    kind: Optional[str] = None
    message: Optional[str] = None
    status_code: int = 200

def parse_payload(raw: Optional[str]) -> Dict[str, Any]:
    if raw is None or not raw.strip():
        raise BadRequest("Form data is empty. Please try again.")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BadRequest(f"Form data is not valid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise BadRequest("Form data must be a JSON object of question/answer pairs")
    return data

def resolve_credentials(cfg: Settings) -> MailCredentials:
    user = (cfg.email_user or "").strip()
    password = (cfg.email_pass or "").strip()
    recipient = (cfg.notification_email or "").strip()
    missing = [name for name, value in (("EMAIL_USER", user), ("EMAIL_PASS", password),
                                        ("NOTIFICATION_EMAIL", recipient)) if not value]
    if missing:
        raise ConfigurationError(f"Server missing email configuration: {', '.join(missing)}")
    return MailCredentials(user=user, password=password, recipient=recipient)

def _scalar_value(answer: Any) -> str:
    if answer is None or answer == "":
        return PLACEHOLDER
    if isinstance(answer, str):
        return answer
    if isinstance(answer, (dict, bool)):
        return json.dumps(answer, ensure_ascii=False)
    return str(answer)

def display_value(answer: Any) -> str:
    if isinstance(answer, (list, tuple)):
        return ", ".join(_scalar_value(item) for item in answer)
    return _scalar_value(answer)

def render_rows(payload: Mapping[str, Any]) -> List[SummaryRow]:
    return [
        SummaryRow(index=i, label=label_for(str(question)), value=display_value(answer))
        for i, (question, answer) in enumerate(payload.items())
    ]

def client_name(payload: Mapping[str, Any]) -> str:
    value = payload.get(NAME_QUESTION)
    name = display_value(value) if value not in (None, "", []) else ""
    # header values must stay on one line
    return " ".join(name.split()) or "Client"

def render_html(rows: Sequence[SummaryRow], destination: Optional[str] = None) -> str:
    cells = "".join(f"""
          <tr>
            <td style="border:{BORDER};padding:12px;text-align:center;">{escape(row.value)}</td>
            <td style="border:{BORDER};padding:12px;text-align:right;font-weight:bold;color:{BRAND_COLOR};background:{BRAND_TINT};">{escape(row.label)}</td>
            <td style="border:{BORDER};padding:12px;text-align:center;width:30px;background:{BRAND_COLOR};color:white;">{row.index + 1}</td>
          </tr>""" for row in rows)
    href = escape(destination or "#", quote=True)
    return f"""
          <div dir="rtl" style="font-family:sans-serif;max-width:850px;margin:10px auto;border:{BORDER};">
            <div style="background:{BRAND_COLOR};color:white;padding:20px;text-align:center;font-size:20px;font-weight:bold;">
               {SENDER_NAME}
            </div>
            <table style="width:100%;border-collapse:collapse;"><tbody>{cells}</tbody></table>
            <div style="padding:15px;background:#f8fafc;text-align:center;border-top:{BORDER};">
              <p>Google Drive: <a href="{href}" style="color:{BRAND_COLOR};font-weight:bold;">Folder Link</a></p>
            </div>
          </div>"""

def render_text(rows: Sequence[SummaryRow], destination: Optional[str] = None) -> str:
    lines = [SENDER_NAME, ""]
    lines += [f"{row.index + 1}. {row.label}: {row.value}" for row in rows]
    lines += ["", f"Google Drive: {destination or '-'}"]
    return "\n".join(lines) + "\n"

def _content_type(filename: str) -> tuple:
    ctype, encoding = mimetypes.guess_type(filename)
    if ctype is None or encoding is not None:
        ctype = "application/octet-stream"
    maintype, subtype = ctype.split("/", 1)
    if maintype in ("multipart", "message"):
        return "application", "octet-stream"
    return maintype, subtype

def compose_message(payload: Mapping[str, Any], rows: Sequence[SummaryRow], attachments: Sequence[Attachment],
                    credentials: MailCredentials, destination: Optional[str] = None) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = f"New Brief Submission - {client_name(payload)}"
    msg["From"] = formataddr((SENDER_NAME, credentials.user))
    msg["To"] = credentials.recipient
    msg.set_content(render_text(rows, destination))
    msg.add_alternative(render_html(rows, destination), subtype="html")
    for att in attachments:
        maintype, subtype = _content_type(att.filename)
        with open(att.path, "rb") as f:
            msg.add_attachment(f.read(), maintype=maintype, subtype=subtype, filename=att.filename)
    return msg

def submit(payload: Union[str, Mapping[str, Any], None], attachments: Sequence[Attachment],
           destination: Optional[str], cfg: Settings, transport) -> SubmitResult:
    """Render the brief and hand it to ``transport`` exactly once.

    Never raises: every failure comes back as a ``SubmitResult`` carrying the
    failure kind. Temporary attachments are deleted after a successful send,
    and after a failed one when ``cfg.cleanup_on_failure`` is set.
    """
    attachments = list(attachments or [])
    try:
        data = payload if isinstance(payload, Mapping) else parse_payload(payload)
        credentials = resolve_credentials(cfg)
        total = sum(a.size for a in attachments)
        if total > cfg.max_total_upload_bytes:
            raise PayloadTooLarge(f"Attachments total {total} bytes, limit is {cfg.max_total_upload_bytes}")
        rows = render_rows(data)
        message = compose_message(data, rows, attachments, credentials, destination)
        logger.info("Sending brief for %s: %d answers, %d attachments -> %s",
                    client_name(data), len(rows), len(attachments), credentials.recipient)
        transport.send(message, credentials)
    except RelayError as e:
        logger.error("Submission failed [%s]: %s", e.kind, e)
        result = SubmitResult(ok=False, kind=e.kind, message=str(e), status_code=e.status_code)
    except Exception as e:
        logger.exception("Submission failed [InternalError]")
        result = SubmitResult(ok=False, kind=InternalError.kind,
                              message=f"Unknown server error during email send: {e}",
                              status_code=InternalError.status_code)
    else:
        logger.info("Brief email sent")
        result = SubmitResult(ok=True)

    if result.ok or cfg.cleanup_on_failure:
        discard(attachments)
    return result
