# chatgen/core/config.py
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SYSTEM_PROMPT = (
    "Reply in the same language the user writes in. "
    "If the user writes in Hindi, answer in Hindi."
)


class Settings(BaseSettings):
    # SQLite local por defecto (./db/users.db), igual que el server original
    DATABASE_URL: str = "sqlite+aiosqlite:///./db/users.db"
    STORE_TIMEOUT_SECONDS: float = 5.0

    ALLOWED_ORIGINS: str = "*"

    # "strict": 8+ chars, 1 mayúscula, 1 dígito, 1 símbolo de @$!%*?&
    # "none": cualquier password no vacío
    PASSWORD_POLICY: Literal["strict", "none"] = "strict"

    # 🤖 Chat (Groq, API compatible con OpenAI)
    GROQ_API_KEY: str | None = None
    GROQ_API_URL: str = "https://api.groq.com/openai/v1/chat/completions"
    GROQ_MODEL: str = "llama3-8b-8192"
    CHAT_SYSTEM_PROMPT: str = DEFAULT_SYSTEM_PROMPT
    CHAT_EMPTY_REPLY: str = "No response from the model."

    # 🖼️ Imágenes
    IMAGE_API_URL: str = "https://api.puter.com/v2/image/generate"
    IMAGE_WIDTH: int = 512
    IMAGE_HEIGHT: int = 512
    IMAGE_SAMPLES: int = 1

    UPSTREAM_TIMEOUT_SECONDS: float = 60.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allow_origins_list(self) -> List[str]:
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
