from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    email_user: str | None = None
    email_pass: str | None = None
    notification_email: str | None = None

    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_security: str = "ssl"  # ssl | starttls | none
    smtp_timeout_seconds: float = 20.0

    upload_dir: str = "uploads"
    max_file_bytes: int = 25 * 1024 * 1024
    max_total_upload_bytes: int = 25 * 1024 * 1024
    cleanup_on_failure: bool = True

    port: int = 3000
    public_base_url: str = "http://localhost:3000"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

settings = Settings()
