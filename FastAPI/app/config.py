from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60  # 1 hour session
    app_env: str = "development"  # development, staging, production

    # Session cookie carrying the access token
    session_cookie_name: str = "token"

    # CORS origins as comma-separated values
    # Example: "https://app.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://127.0.0.1:5500"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # bcrypt cost factor; tests lower it
    bcrypt_rounds: int = 12

    # Mock video-conferencing provider used for online interviews
    meeting_base_url: str = "https://meet.talent-api.local"

    # Public job offer browsing
    job_offer_page_size: int = 20
    job_offer_max_page_size: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_production(self) -> bool:
        return (self.app_env or "development").lower() in {"production", "prod"}


settings = Settings()
