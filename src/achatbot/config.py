"""Configuration management for AChatBot."""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """AChatBot configuration."""

    bot_name: str = "AChatBot"
    farewell: str = "Bye. Hope to see you again soon!"
    # Shown before each read; empty means no prompt
    prompt: str = ""

    @property
    def greeting(self) -> str:
        return f"Hello! I'm {self.bot_name}\nWhat can I do for you?"


def _unquote(value: str) -> str:
    """Strip matching quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from a `key = value` file. No path means defaults."""
    config = Config()

    if path is None:
        return config

    config_file = Path(path).expanduser()
    if not config_file.exists():
        logger.warning(f"Config file {config_file} not found, using defaults")
        return config

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            logger.warning(f"Ignoring malformed config line: {line}")
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "bot_name":
                config.bot_name = value
            case "farewell":
                config.farewell = value
            case "prompt":
                config.prompt = value
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config
