"""
Cấu hình API, đọc từ biến môi trường hoặc file .env
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Số câu mặc định cho một lượt kiểm tra xếp lớp
    placement_quiz_size: int = Field(default=20, ge=1, validation_alias="PLACEMENT_QUIZ_SIZE")
    max_quiz_size: int = Field(default=100, ge=1, validation_alias="PLACEMENT_MAX_QUIZ_SIZE")

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"], validation_alias="CORS_ALLOW_ORIGINS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
