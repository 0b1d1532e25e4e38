import os

from .loader import section


class Tags:
    def __init__(self, config: dict | None = None) -> None:
        tags_cfg = section(config, "tags")
        self.COMMAND_PREFIX: str = str(tags_cfg.get("command_prefix", os.getenv("COMMAND_PREFIX", "!")))
        self.MAX_COLOR: int = int(tags_cfg.get("max_color", os.getenv("MAX_COLOR", "16777215")))
        report_raw = tags_cfg.get("report_status", os.getenv("REPORT_STATUS", "1"))
        self.REPORT_STATUS: bool = str(report_raw).lower() in ("1", "true", "yes")

        if not self.COMMAND_PREFIX:
            raise ValueError("COMMAND_PREFIX must not be empty")
        if not 0 <= self.MAX_COLOR <= 0xFFFFFF:
            raise ValueError("MAX_COLOR must fit in 24 bits")
