"""
Настройки приложения

"""
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Определяем путь к корню проекта (где находится settings.py)
PROJECT_ROOT = Path(__file__).parent
ENV_FILE = PROJECT_ROOT / ".env"

STRAY_LINE_POLICIES = ("skip", "error")


class Settings(BaseSettings):
    """Настройки приложения

    Примечание: Значения можно переопределить через переменные окружения
    или .env файл, у всех полей есть разумные значения по умолчанию.
    """

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Application
    APP_NAME: str = "XER Reader"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

    # Кодировка XER файлов ("auto" - определение через chardet)
    XER_ENCODING: str = "utf-8"
    XER_DETECT_SAMPLE_SIZE: int = 10240  # байт для определения кодировки
    XER_DETECT_MIN_CONFIDENCE: float = 0.7
    XER_FALLBACK_ENCODING: str = "cp1252"  # P6 по умолчанию выгружает в windows-1252

    # Что делать со строками между таблицами, которые не %T/%E: "skip" или "error"
    XER_STRAY_LINE_POLICY: str = "skip"

    @field_validator('XER_STRAY_LINE_POLICY', mode='before')
    @classmethod
    def validate_stray_line_policy(cls, v):
        """Допустимы только значения из STRAY_LINE_POLICIES."""
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in STRAY_LINE_POLICIES:
            raise ValueError(f"XER_STRAY_LINE_POLICY must be one of {STRAY_LINE_POLICIES}, got {v!r}")
        return v


settings = Settings()
