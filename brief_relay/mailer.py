import logging, smtplib, ssl
from email.message import EmailMessage

from .errors import AuthenticationError, ConfigurationError, TransportError, TransportTimeout
from .settings import Settings

logger = logging.getLogger(__name__)

SECURITY_MODES = ("ssl", "starttls", "none")

class SmtpTransport:
    """Sends one message per connection.

    The connection is always authenticated before ``send_message``; a failed
    login is reported as ``AuthenticationError`` so it is not confused with
    an unreachable server.
    """

    def __init__(self, host: str, port: int, security: str = "ssl", timeout: float = 20.0):
        self.host = host
        self.port = port
        self.security = (security or "").strip().lower()
        self.timeout = timeout

    def _connect(self) -> smtplib.SMTP:
        if self.security not in SECURITY_MODES:
            raise ConfigurationError(f"Unknown SMTP security mode '{self.security}', expected one of {', '.join(SECURITY_MODES)}")
        if self.security == "ssl":
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=ssl.create_default_context())
        server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        if self.security == "starttls":
            try:
                server.starttls(context=ssl.create_default_context())
            except Exception:
                server.close()
                raise
        return server

    def send(self, message: EmailMessage, credentials) -> None:
        where = f"{self.host}:{self.port}"
        logger.debug("Connecting to %s (%s)", where, self.security)
        try:
            with self._connect() as server:
                server.login(credentials.user, credentials.password)
                server.send_message(message)
        except smtplib.SMTPAuthenticationError as e:
            raise AuthenticationError(f"Mail server {where} rejected the sender credentials ({e.smtp_code})") from e
        except TimeoutError as e:
            raise TransportTimeout(f"Mail server {where} did not answer within {self.timeout:g}s") from e
        except smtplib.SMTPRecipientsRefused as e:
            raise TransportError(f"Mail server {where} refused recipient(s): {', '.join(e.recipients)}") from e
        except smtplib.SMTPServerDisconnected as e:
            # smtplib wraps a read timeout into a disconnect
            if isinstance(e.__context__, TimeoutError):
                raise TransportTimeout(f"Mail server {where} did not answer within {self.timeout:g}s") from e
            raise TransportError(f"Mail server {where} closed the connection: {e}") from e
        except smtplib.SMTPSenderRefused as e:
            raise TransportError(f"Mail server {where} refused sender {e.sender}: {e.smtp_code}") from e
        except smtplib.SMTPException as e:
            raise TransportError(f"Mail server {where} error: {e}") from e
        except OSError as e:
            raise TransportError(f"Could not reach mail server {where}: {e}") from e

def transport_from_settings(cfg: Settings) -> SmtpTransport:
    return SmtpTransport(cfg.smtp_host, cfg.smtp_port, cfg.smtp_security, cfg.smtp_timeout_seconds)
