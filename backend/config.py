import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from backend.models.reference import Language

DEFAULT_LOG_FILE = os.path.join(os.path.dirname(__file__), "..", "logs.txt")


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class AppConfig(BaseModel):
    """Runtime preferences. Immutable; use ``with_language`` / ``reload`` to get a new one."""
    model_config = ConfigDict(frozen=True)

    language: Language = Language.EN
    theme: Theme = Theme.LIGHT
    simulated_delay_seconds: float = Field(1.5, ge=0, description="Artificial latency before computing, seconds")
    log_file: str = DEFAULT_LOG_FILE
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    @property
    def direction(self) -> str:
        return self.language.direction

    @classmethod
    def from_env(cls) -> "AppConfig":
        load_dotenv()
        origins = os.getenv("VALUATION_CORS_ORIGINS", "http://localhost:5173")
        return cls(
            language=Language(os.getenv("VALUATION_LANGUAGE", "en").lower()),
            theme=Theme(os.getenv("VALUATION_THEME", "light").lower()),
            simulated_delay_seconds=float(os.getenv("VALUATION_SIMULATED_DELAY", "1.5")),
            log_file=os.getenv("VALUATION_LOG_FILE", DEFAULT_LOG_FILE),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )

    def with_language(self, language: Language) -> "AppConfig":
        return self.model_copy(update={"language": language})

    def reload(self) -> "AppConfig":
        return AppConfig.from_env()
