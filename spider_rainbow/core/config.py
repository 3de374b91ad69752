"""Configuration management for the Spider Rainbow service."""

from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from ..utils.validation import validate_destination

# Load environment variables
load_dotenv()


class Config(BaseSettings):
    """Configuration class for the Spider Rainbow service."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=3001)
    cors_origins: List[str] = Field(default=["http://localhost:3000", "http://localhost:5173"])
    service_name: str = Field(default="Spider Rainbow")
    service_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=True, description="Write rotating log files under logs_dir")
    logs_dir: str = Field(default="logs")

    # Click zones
    spider_top_url: str = Field(default="https://www.youtube.com/@wiggitywhitney")
    spider_bottom_url: str = Field(default="https://www.youtube.com/@DevOpsToolkit")
    spider_split_percent: float = Field(default=50.0, description="Vertical split between the two spider zones")
    surprise_spider_urls: List[str] = Field(
        default=[],
        description="Quadrant destinations: top-left, top-right, bottom-left, bottom-right",
    )

    class Config:
        """Pydantic configuration for environment loading."""

        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore unexpected env vars rather than raising errors

    def validate_config(self) -> bool:
        """Validate configuration values."""
        if not 0 < self.api_port < 65536:
            raise ValueError("API port must be between 1 and 65535")

        if self.spider_split_percent < 0 or self.spider_split_percent > 100:
            raise ValueError("Spider split percent must be between 0 and 100")

        if len(self.surprise_spider_urls) not in (0, 4):
            raise ValueError("Surprise spider needs exactly four quadrant URLs")

        for url in [self.spider_top_url, self.spider_bottom_url, *self.surprise_spider_urls]:
            is_valid, error = validate_destination(url)
            if not is_valid:
                raise ValueError(f"Invalid zone destination {url!r}: {error}")

        return True


# Global configuration instance
config = Config()
