#!/usr/bin/env python3
from dataclasses import dataclass, replace
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

@dataclass
class Config:
    """Application configuration"""
    headless: bool = os.getenv("SNIFFER_HEADLESS", "true").lower() in ["true", "1", "yes"]
    navigation_timeout_ms: int = int(os.getenv("SNIFFER_NAVIGATION_TIMEOUT_MS", "60000"))
    selector_timeout_ms: int = int(os.getenv("SNIFFER_SELECTOR_TIMEOUT_MS", "5000"))
    # Extra wait after load for late client-side rendering
    settle_delay_ms: int = int(os.getenv("SNIFFER_SETTLE_DELAY_MS", "2000"))
    user_agent: str = os.getenv("SNIFFER_USER_AGENT", DEFAULT_USER_AGENT)
    viewport_width: int = int(os.getenv("SNIFFER_VIEWPORT_WIDTH", "1366"))
    viewport_height: int = int(os.getenv("SNIFFER_VIEWPORT_HEIGHT", "768"))

    # Artifacts
    public_dir: Path = Path(os.getenv("SNIFFER_PUBLIC_DIR", "./public"))
    archive_dir: Path = Path(os.getenv("SNIFFER_ARCHIVE_DIR", "./old-computed-styles"))
    log_dir: Path = Path(os.getenv("SNIFFER_LOG_DIR", "./logs"))
    log_level: str = os.getenv("SNIFFER_LOG_LEVEL", "INFO").upper()

    def with_overrides(self, **overrides) -> "Config":
        """Copy of this config with the non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)

config = Config()
