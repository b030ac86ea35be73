"""Run configuration for the rota command."""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class RotaConfig:
    """Configuration for one rota run."""

    year: int = 2023
    month: int = 1

    # Outputs
    xlsx_path: Optional[str] = None  # None = auto-named file in output_dir
    write_xlsx: bool = True
    json_path: Optional[str] = None
    output_dir: str = "."

    # Presentation
    weekday_locale: str = "en"  # "en" or "zh"
    color: bool = True  # ANSI red for rest days in the text report

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def month_key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "year": self.year,
            "month": self.month,
            "xlsx_path": self.xlsx_path,
            "write_xlsx": self.write_xlsx,
            "json_path": self.json_path,
            "output_dir": self.output_dir,
            "weekday_locale": self.weekday_locale,
            "color": self.color,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "RotaConfig":
        """Create from dictionary, ignoring unknown keys."""
        cfg = cls()
        for key, value in d.items():
            if hasattr(cfg, key):
                setattr(cfg, key, value)
        return cfg
