import socket

from brief_relay.relay import submit
from brief_relay.mailer import SmtpTransport


def test_server_that_never_greets_times_out(cfg):
    # the kernel completes the handshake; nobody ever sends the SMTP banner
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]
    try:
        result = submit({"name": "Acme"}, [], None, cfg, SmtpTransport("127.0.0.1", port, "none", timeout=0.5))
    finally:
        listener.close()
    assert result.kind == "TransportError"
    assert result.status_code == 504
    assert "did not answer" in result.message
