# tuition_api/core/config.py
"""Application configuration using Pydantic."""
from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from typing import List

load_dotenv()

class Settings(BaseSettings):
    database_url: str = 'sqlite+aiosqlite:///./tuition.db'

    # Key material for the reversible branch-admin password cipher
    credential_secret: str = 'change-me-branch-secret'
    bcrypt_rounds: int = 10

    activity_log_limit: int = 100
    expose_admin_password_on_read: bool = True
    receipt_prefix: str = 'V18'

    app_name: str = 'tuition_api'
    app_version: str = '1.0.0'
    environment: str = 'development'
    log_level: str = 'info'
    allowed_origins: List[str] = ['*']

    model_config = {
        'env_file': '.env',
        'extra': 'ignore'
    }

settings = Settings()
