import logging, os, time
from dataclasses import dataclass
from typing import Any, Iterable, List

from .errors import PayloadTooLarge

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

@dataclass(frozen=True)
class Attachment:
    filename: str   # name the respondent picked
    path: str       # temporary copy on disk
    size: int

def ensure_upload_dir(upload_dir: str) -> None:
    try:
        os.makedirs(upload_dir, exist_ok=True)
    except OSError as e:
        logger.warning("Could not create upload directory %s: %s", upload_dir, e)

def _original_name(upload: Any) -> str:
    # browsers on Windows may send the full client path
    return os.path.basename((getattr(upload, "filename", None) or "").replace("\\", "/")).strip()

def _mib(n: int) -> str:
    return f"{n / (1024 * 1024):g} MB"

def store_uploads(files: Iterable[Any], upload_dir: str, max_file_bytes: int, max_total_bytes: int) -> List[Attachment]:
    """Write uploaded parts to ``upload_dir`` and return them as attachments.

    Size caps are enforced while streaming; when one is exceeded every file
    already written for this request is removed and ``PayloadTooLarge`` is
    raised.
    """
    os.makedirs(upload_dir, exist_ok=True)
    stamp = int(time.time() * 1000)
    written: List[str] = []
    attachments: List[Attachment] = []
    total = 0
    try:
        for position, upload in enumerate(files):
            original = _original_name(upload)
            if not original:
                continue
            path = os.path.join(upload_dir, f"{stamp}-{position}-{original}")
            written.append(path)
            size = 0
            with open(path, "wb") as out:
                while True:
                    chunk = upload.file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    total += len(chunk)
                    if size > max_file_bytes:
                        raise PayloadTooLarge(f"File '{original}' exceeds the {_mib(max_file_bytes)} per-file limit")
                    if total > max_total_bytes:
                        raise PayloadTooLarge(f"Attachments exceed the {_mib(max_total_bytes)} total limit")
                    out.write(chunk)
            attachments.append(Attachment(filename=original, path=path, size=size))
    except Exception:
        _remove_paths(written)
        raise
    return attachments

def _remove_paths(paths: Iterable[str]) -> None:
    for path in paths:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not delete temporary file %s: %s", path, e)

def discard(attachments: Iterable[Attachment]) -> None:
    _remove_paths(a.path for a in attachments)
