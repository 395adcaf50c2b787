class RelayError(Exception):
    kind = "InternalError"
    status_code = 500

class BadRequest(RelayError):
    kind = "BadRequest"
    status_code = 400

class PayloadTooLarge(BadRequest):
    kind = "PayloadTooLarge"
    status_code = 413

class ConfigurationError(RelayError):
    kind = "ConfigurationError"
    status_code = 500

class AuthenticationError(RelayError):
    kind = "AuthenticationError"
    status_code = 502

class TransportError(RelayError):
    kind = "TransportError"
    status_code = 502

class TransportTimeout(TransportError):
    status_code = 504

class InternalError(RelayError):
    pass
