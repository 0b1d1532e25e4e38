import os

from .loader import section


class Core:
    def __init__(self, config: dict | None = None) -> None:
        discord_cfg = section(config, "discord")
        logging_cfg = section(config, "logging")

        token_env = str(discord_cfg.get("token_env", "DISCORD_API_TOKEN"))

        # May stay unset here; the CLI token flag can still supply it.
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)
        self.LOG_LEVEL: str = str(logging_cfg.get("level", os.getenv("LOG_LEVEL", "INFO"))).upper()
