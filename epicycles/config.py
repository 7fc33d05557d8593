"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from epicycles.engine.config import EngineConfig


class Settings(BaseSettings):
    epicycles_env: str = "development"
    epicycles_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Engine tuning
    negligibility_threshold: float = 1e-6
    target_visual_size: float = 300.0
    mean_distance_factor: float = 1.5
    trace_max_points: int = 1000
    cycle_hold_seconds: float = 1.0
    default_speed: float = 0.8

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            negligibility_threshold=self.negligibility_threshold,
            target_visual_size=self.target_visual_size,
            mean_distance_factor=self.mean_distance_factor,
            trace_max_points=self.trace_max_points,
            cycle_hold_seconds=self.cycle_hold_seconds,
            default_speed=self.default_speed,
        )


settings = Settings()
