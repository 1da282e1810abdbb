from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Literal

class Settings(BaseSettings):
    # ---------- App Settings ----------
    APP_NAME: str = "Code Optimizer"
    LOG_LEVEL: str = "INFO"

    # ---------- CORS ----------
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # ---------- LLM (Ollama) ----------
    OLLAMA_HOST: str = "http://localhost:11434"
    LLM_MODEL: str = "phi3"
    LLM_API: Literal["generate", "chat", "prompt"] = "generate"
    LLM_TIMEOUT: float = 120

    # ---------- Prompt template ----------
    CODE_LANGUAGE: str = "JavaScript"
    CODE_FENCE: str = "javascript"
    SYSTEM_PROMPT: str = "You are a senior {language} engineer."
    USER_PROMPT: str = "Optimize this code:\n```{fence}\n{code}\n```"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()
