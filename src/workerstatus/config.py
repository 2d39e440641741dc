"""
Configuration for WorkerStatus.

Uses Pydantic for validation and environment loading.
"""

import logging
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StatusConfig(BaseSettings):
    """Master configuration for WorkerStatus.

    Key names default to the ones existing Resque deployments already use,
    so changing them detaches the registry from any state already stored.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORKERSTATUS_",
        env_file=".env",
        extra="ignore",
    )

    # Redis connection
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis URL")
    socket_timeout: Optional[float] = Field(
        default=None, description="Redis socket timeout in seconds, None=blocking"
    )

    # Key names
    key_prefix: str = Field(default="", description="Prefix applied to every key")
    worker_key: str = Field(default="ResqueWorker", description="Worker registry hash")
    scheduler_worker_key: str = Field(
        default="ResqueSchedulerWorker", description="Scheduler pointer string"
    )
    paused_worker_key: str = Field(default="PausedWorker", description="Paused set")

    # Identity
    hostname: Optional[str] = Field(
        default=None, description="Host name used in worker keys, None=socket.gethostname()"
    )

    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "StatusConfig":
        """Load configuration from environment variables."""
        timeout = os.getenv("REDIS_SOCKET_TIMEOUT")
        return cls(
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            socket_timeout=float(timeout) if timeout else None,
            key_prefix=os.getenv("WORKERSTATUS_KEY_PREFIX", ""),
            worker_key=os.getenv("WORKERSTATUS_WORKER_KEY", "ResqueWorker"),
            scheduler_worker_key=os.getenv(
                "WORKERSTATUS_SCHEDULER_KEY", "ResqueSchedulerWorker"
            ),
            paused_worker_key=os.getenv("WORKERSTATUS_PAUSED_KEY", "PausedWorker"),
            hostname=os.getenv("WORKERSTATUS_HOSTNAME") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


_config: Optional[StatusConfig] = None


def get_config() -> StatusConfig:
    """Get or load the process-wide configuration."""
    global _config
    if _config is None:
        _config = StatusConfig.from_env()
    return _config


def setup_logging(level: Optional[str] = None):
    """Setup logging configuration."""
    if level is None:
        level = get_config().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
