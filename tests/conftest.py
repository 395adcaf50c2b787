import pytest

from brief_relay.settings import Settings

class RecordingTransport:
    """Stands in for SmtpTransport; remembers every message it is handed."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def send(self, message, credentials):
        self.calls.append((message, credentials))
        if self.error is not None:
            raise self.error

@pytest.fixture
def cfg(tmp_path):
    return Settings(
        _env_file=None,
        email_user="agency@example.com",
        email_pass="app-password",
        notification_email="briefs@example.com",
        upload_dir=str(tmp_path / "uploads"),
    )

@pytest.fixture
def transport():
    return RecordingTransport()
