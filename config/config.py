import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def _env_str(name: str) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, resolved once at startup.

    Credentials may be missing; that is reported per request, not at startup.
    """

    tavily_api_key: str | None = None
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    openai_base_url: str | None = None
    openai_max_output_tokens: int = 800
    openai_temperature: float = 0.2
    search_timeout_s: float = 15.0
    openai_timeout_s: float = 30.0
    require_structured_output: bool = False
    cors_allow_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "Settings":
        """
        Build settings from environment variables.

        A ``.env`` file at the project root is loaded first when it exists;
        variables already set in the environment win.
        """
        env_path = env_file or Path(__file__).parent.parent / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        return cls(
            tavily_api_key=_env_str("TAVILY_API_KEY"),
            openai_api_key=_env_str("OPENAI_API_KEY"),
            openai_model=_env_str("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
            openai_base_url=_env_str("OPENAI_BASE_URL"),
            openai_max_output_tokens=int(os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "800")),
            openai_temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.2")),
            search_timeout_s=float(os.getenv("SEARCH_TIMEOUT_S", "15")),
            openai_timeout_s=float(os.getenv("OPENAI_TIMEOUT_S", "30")),
            require_structured_output=_env_flag("REQUIRE_STRUCTURED_OUTPUT"),
            cors_allow_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        )

    def missing_credentials(self) -> list[str]:
        """Names of credential variables that are not configured."""
        missing = []
        if not self.tavily_api_key:
            missing.append("TAVILY_API_KEY")
        if not self.openai_api_key:
            missing.append("OPENAI_API_KEY")
        return missing

    def get_model_info(self) -> str:
        if self.openai_base_url:
            return f"OpenAI-compatible ({self.openai_model} @ {self.openai_base_url})"
        return f"OpenAI ({self.openai_model})"
