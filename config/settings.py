"""Application settings loaded from .env file"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Literal

LOG_LEVEL = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
URGENCY_MODEL = Literal["score", "keyword"]

class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables (.env)
    """
    # Logging configuration
    log_level: LOG_LEVEL = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)"
    )
    log_format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s:%(lineno)d - %(message)s",
        description="Log record format"
    )
    log_date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date/time format for logs"
    )
    log_to_file: bool = Field(
        default=False,
        description="If true, also write logs to log_file_path"
    )
    log_file_path: str = Field(
        default="logs/grievance.log",
        description="Path to log file"
    )
    log_file_rotation: str = Field(
        default="midnight",
        description="Log file rotation interval"
    )
    log_file_retention: int = Field(
        default=7,
        ge=1,
        description="Number of rotated log files to keep"
    )

    # Similarity detection
    similarity_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Jaccard similarity a prior complaint must exceed to be reported"
    )
    similarity_min_word_length: int = Field(
        default=3,
        ge=0,
        description="Words of this length or shorter are ignored when comparing complaints"
    )

    # Pipeline execution
    parallel_stages: bool = Field(
        default=True,
        description="Run sentiment, classification and similarity stages on a thread pool"
    )
    stage_workers: int = Field(
        default=3,
        ge=1,
        description="Thread pool size for the independent analysis stages"
    )

    # Submission workflow
    urgency_model: URGENCY_MODEL = Field(
        default="score",
        description="Urgency model copied into grievance records: 'score' (sentiment score) or 'keyword' (urgent keyword increments)"
    )
    block_on_analysis_error: bool = Field(
        default=False,
        description="Reject a submission when any analysis stage fell back to its default or the pipeline failed"
    )
    tracking_id_prefix: str = Field(
        default="GR",
        min_length=1,
        description="Prefix of public grievance tracking IDs"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
