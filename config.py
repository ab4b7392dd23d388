"""
config.py - Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks EXPR_PLOT_.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Renderowanie wykresów
    plot_backend: Literal["rich", "matplotlib"] = "matplotlib"
    plot_output_dir: str = "plots"
    plot_dpi: int = 100

    # App
    app_title: str = "ExprPlot"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="EXPR_PLOT_", env_file=".env", extra="ignore")
