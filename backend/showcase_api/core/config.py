# showcase_api/core/config.py
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ------------------------------------------------------------------------------
# .env (optional), loaded before Settings reads the environment
# ------------------------------------------------------------------------------
load_dotenv()

# ------------------------------------------------------------------------------
# Anchor roots (independent of CWD)
# API_ROOT points to .../backend, PROJECT_ROOT to the repository root
# ------------------------------------------------------------------------------
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
API_ROOT = PACKAGE_ROOT.parent
PROJECT_ROOT = API_ROOT.parent

# ------------------------------------------------------------------------------
# Early defaults for HF/Torch caches, set before transformers is ever imported.
# Model downloads stay inside the repo unless APP_MODEL_CACHE_ROOT says otherwise.
# ------------------------------------------------------------------------------
DEFAULT_MODELS_CACHE = os.getenv("APP_MODEL_CACHE_ROOT", str(API_ROOT / "models_cache"))
os.environ.setdefault("HF_HOME", str(Path(DEFAULT_MODELS_CACHE) / "huggingface"))
os.environ.setdefault("TORCH_HOME", str(Path(DEFAULT_MODELS_CACHE) / "torch"))
os.environ.setdefault("HF_HUB_DISABLE_SYMLINKS_WARNING", "1")

# Task identifiers understood by the provider
IMAGE_CLASSIFICATION = "image-classification"
SENTIMENT_ANALYSIS = "sentiment-analysis"
SUMMARIZATION = "summarization"


class Settings(BaseSettings):
    """
    Showcase API settings.

    Every field can be overridden with an `APP_`-prefixed variable
    (APP_PORT, APP_SENTIMENT_MODEL, ...) or from `.env`. Relative paths are
    resolved against the backend directory, never the working directory.
    """

    # ================================
    # Service identity and server
    # ================================
    APP_NAME: str = "AI Showcase"
    VERSION: str = "0.1.0"
    ENV: str = Field("development", description="development | staging | production")
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True  # dev only

    # /env endpoint exposure in production (optional)
    EXPOSE_ENV_ENDPOINT: bool = False
    ENV_SECRET_TOKEN: str | None = None

    # ================================
    # Logging configuration
    # ================================
    LOG_LEVEL: str = "info"
    LOG_LEVEL_UVICORN: str = "warning"
    LOG_LEVEL_SERVICES: str = "info"
    LOG_CONSOLE_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    LOG_ERRORS_TO_FILE: bool = True
    ERROR_LOG_FILE: Path = API_ROOT / "logs" / "errors.log"
    ERROR_LOG_MAX_BYTES: int = 1_048_576  # 1 MB
    ERROR_LOG_BACKUPS: int = 5

    LOG_SERVICES_TO_FILE: bool = True
    SERVICES_LOG_FILE: Path = API_ROOT / "logs" / "services.log"
    DOCS_SHOW_SCHEMAS: bool = False

    # ================================
    # Device / models
    # ================================
    DEVICE: str = Field(
        default="cpu",
        description="e.g., 'cuda:0', 'cpu', 'mps' (macOS), 'cuda:1', etc.",
    )
    IMAGE_CLASSIFICATION_MODEL: str = "timm/mobilenetv4_conv_small.e2400_r224_in1k"
    SENTIMENT_MODEL: str = "distilbert/distilbert-base-uncased-finetuned-sst-2-english"
    SUMMARIZATION_MODEL: str = "sshleifer/distilbart-cnn-6-6"

    IMAGE_TOP_K: int = 5
    SENTIMENT_TOP_K: int = 1
    SUMMARY_MIN_CHARS: int = 50
    PRELOAD_MODELS: bool = False  # build all pipelines at startup

    # ================================
    # Model caches (project-local by default)
    # ================================
    MODEL_CACHE_ROOT: Path = Path(DEFAULT_MODELS_CACHE)
    HF_HOME: Path | None = None
    TORCH_HOME: Path | None = None
    TRANSFORMERS_OFFLINE: int | bool | None = None  # 1/true to force offline

    # ================================
    # Paths / uploads
    # ================================
    TEMPLATES_DIR: Path = PACKAGE_ROOT / "templates"
    UPLOAD_MAX_MB: int = 20

    # ================================
    # CORS configuration
    # ================================
    CORS_ALLOW_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_METHODS: list[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: list[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_CREDENTIALS: bool = False

    # ================================
    # Pooling
    # ================================
    IDLE_UNLOAD_SECONDS: int = 600  # drop a pipeline after N seconds of inactivity
    SWEEP_INTERVAL_SECONDS: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
        extra="ignore",
    )

    def model_post_init(self, __context: Any) -> None:
        if not self.HF_HOME:
            self.HF_HOME = self.MODEL_CACHE_ROOT / "huggingface"
        if not self.TORCH_HOME:
            self.TORCH_HOME = self.MODEL_CACHE_ROOT / "torch"

    # -------------------------------
    # Utilities
    # -------------------------------
    @property
    def upload_max_bytes(self) -> int:
        return self.UPLOAD_MAX_MB * 1024 * 1024

    def model_for(self, task: str) -> str:
        models = {
            IMAGE_CLASSIFICATION: self.IMAGE_CLASSIFICATION_MODEL,
            SENTIMENT_ANALYSIS: self.SENTIMENT_MODEL,
            SUMMARIZATION: self.SUMMARIZATION_MODEL,
        }
        return models[task]

    def ensure_directories(self) -> None:
        """Create cache and log directories if they do not exist."""
        for p in [
            self.MODEL_CACHE_ROOT,
            self.HF_HOME,
            self.TORCH_HOME,
            self.ERROR_LOG_FILE.parent,
            self.SERVICES_LOG_FILE.parent,
        ]:
            if p:
                Path(p).resolve().mkdir(parents=True, exist_ok=True)

    def export_env_for_caches(self) -> None:
        """
        Export cache locations and offline mode so transformers / torch
        pick them up consistently.
        """
        os.environ.setdefault("HF_HOME", str(self.HF_HOME))
        os.environ.setdefault("TORCH_HOME", str(self.TORCH_HOME))
        os.environ.setdefault("HF_HUB_DISABLE_PROGRESS_BARS", "1")

        if self.TRANSFORMERS_OFFLINE is not None:
            value = str(self.TRANSFORMERS_OFFLINE).strip().lower()
            if value in ("1", "true", "yes"):
                os.environ["TRANSFORMERS_OFFLINE"] = "1"
            else:
                os.environ.pop("TRANSFORMERS_OFFLINE", None)

    def summary(self) -> dict:
        """Small snapshot for the /env endpoint."""
        return {
            "app": self.APP_NAME,
            "version": self.VERSION,
            "env": self.ENV,
            "host": self.HOST,
            "port": self.PORT,
            "device": self.DEVICE,
            "models": {
                IMAGE_CLASSIFICATION: self.IMAGE_CLASSIFICATION_MODEL,
                SENTIMENT_ANALYSIS: self.SENTIMENT_MODEL,
                SUMMARIZATION: self.SUMMARIZATION_MODEL,
            },
            "limits": {
                "image_top_k": self.IMAGE_TOP_K,
                "sentiment_top_k": self.SENTIMENT_TOP_K,
                "summary_min_chars": self.SUMMARY_MIN_CHARS,
                "upload_max_mb": self.UPLOAD_MAX_MB,
            },
            "model_cache_root": str(self.MODEL_CACHE_ROOT.resolve()),
            "hf_home": str(Path(self.HF_HOME).resolve()),
            "torch_home": str(Path(self.TORCH_HOME).resolve()),
            "hf_offline": bool(self.TRANSFORMERS_OFFLINE),
            "idle_unload_seconds": self.IDLE_UNLOAD_SECONDS,
            "logs": {
                "console": self.LOG_LEVEL,
                "errors_file": str(self.ERROR_LOG_FILE) if self.LOG_ERRORS_TO_FILE else None,
                "services_file": str(self.SERVICES_LOG_FILE) if self.LOG_SERVICES_TO_FILE else None,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """
    Settings are built once per process. The first call also creates the
    cache/log folders and exports HF_HOME / TORCH_HOME, so it must run before
    the first pipeline is created.
    """
    s = Settings()
    s.ensure_directories()
    s.export_env_for_caches()
    return s
