# yoda/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra="allow")

    # JWT
    jwt_secret_key: str = "your-yoda-secret-key"
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 7

    # Password hashing (bcrypt cost factor)
    bcrypt_rounds: int = 10

    # Letter generation job
    letter_job_enabled: bool = True
    letter_job_interval_seconds: int = 60
    timezone: str = "UTC"  # "today" for schedule matching

    # Demo data
    seed_demo_data: bool = True
    demo_user_name: str = "Mina"
    demo_user_email: str = "mina@gmail.com"
    demo_user_password: str = "password123"

    # Server
    cors_origins: List[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 5002

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

settings = Settings()
