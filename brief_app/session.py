from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .questions import all_questions, default_answers, question

@dataclass
class PendingFile:
    name: str
    data: bytes
    mime: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.data)

class FormSession:
    """Answers and selected files of one respondent.

    Owned by a single Streamlit session; every change goes through a setter
    so widgets never mutate the answer dict directly.
    """

    def __init__(self, destination: Optional[str] = None):
        self.destination = destination
        self.answers: Dict[str, Any] = default_answers()
        self.files: List[PendingFile] = []
        self.submitted = False

    def set_answer(self, key: str, value: Any) -> None:
        q = question(key)
        if q.kind == "multi":
            value = [str(v) for v in (value or [])]
        elif q.kind == "choice":
            allowed = {v for _, v in q.options}
            if value not in allowed:
                raise ValueError(f"{value!r} is not an option of {key!r}")
        else:
            value = "" if value is None else str(value)
        self.answers[key] = value

    def toggle_option(self, key: str, option: str) -> List[str]:
        current = list(self.answers.get(key) or [])
        if option in current:
            current.remove(option)
        else:
            current.append(option)
        self.set_answer(key, current)
        return current

    def add_file(self, name: str, data: bytes, mime: str = "application/octet-stream") -> None:
        self.files.append(PendingFile(name=name, data=data, mime=mime or "application/octet-stream"))

    def add_uploads(self, uploaded: Iterable[Any]) -> int:
        """Take files straight from a Streamlit uploader (name, type, getvalue())."""
        count = 0
        for up in uploaded or []:
            self.add_file(up.name, up.getvalue(), getattr(up, "type", None) or "")
            count += 1
        return count

    def remove_file(self, index: int) -> None:
        if 0 <= index < len(self.files):
            del self.files[index]

    def total_file_bytes(self) -> int:
        return sum(f.size for f in self.files)

    def missing_required(self) -> List[str]:
        return [q.key for q in all_questions() if q.required and not str(self.answers.get(q.key) or "").strip()]

    def payload(self) -> Dict[str, Any]:
        return {k: list(v) if isinstance(v, list) else v for k, v in self.answers.items()}

    def mark_submitted(self) -> None:
        self.submitted = True

    def reset(self) -> None:
        self.answers = default_answers()
        self.files = []
        self.submitted = False
