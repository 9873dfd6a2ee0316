"""Configuration management for generators."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class GeneratorConfig:
    """Producer thread and demo configuration parameters."""

    thread_name_prefix: str = "generator"
    daemon: bool = True
    verbose: bool = False
    demo_items: int = 45

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.thread_name_prefix:
            raise ValueError("thread_name_prefix must not be empty")
        if self.demo_items <= 0:
            raise ValueError("demo_items must be positive")

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Load configuration from environment variables.

        Values from a ``.env`` file in the working directory are loaded
        first; variables already present in the environment take precedence.
        """
        load_dotenv()
        return cls(
            thread_name_prefix=os.getenv("THREADGEN_THREAD_NAME_PREFIX", "generator"),
            daemon=_env_flag("THREADGEN_DAEMON", "true"),
            verbose=_env_flag("THREADGEN_VERBOSE", "false"),
            demo_items=int(os.getenv("THREADGEN_DEMO_ITEMS", "45")),
        )


def get_config() -> GeneratorConfig:
    """Get generator configuration."""
    return GeneratorConfig.from_env()
