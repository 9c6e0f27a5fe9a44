from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict
import json
from pathlib import Path

DEFAULT_CONFIG_PATH = Path("config.json")


@dataclass
class SummarizerConfig:
    default_sentences: int = 5
    min_sentences: int = 1
    max_sentences: int = 20
    export_filename: str = "summary"
    export_format: str = "txt"  # "txt" | "json"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SummarizerConfig":
        # Simple dict→dataclass conversion
        return SummarizerConfig(
            default_sentences=int(data.get("default_sentences", 5)),
            min_sentences=int(data.get("min_sentences", 1)),
            max_sentences=int(data.get("max_sentences", 20)),
            export_filename=data.get("export_filename", "summary"),
            export_format=data.get("export_format", "txt"),
            host=data.get("host", "127.0.0.1"),
            port=int(data.get("port", 8000)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    @staticmethod
    def load_json_str(s: str) -> "SummarizerConfig":
        data = json.loads(s)
        if not isinstance(data, dict):
            raise ValueError(f"config must be a JSON object, got {type(data).__name__}")
        return SummarizerConfig.from_dict(data)

    @staticmethod
    def load(path: Path) -> "SummarizerConfig":
        """Read config from `path`; a missing file gives the defaults."""
        path = Path(path)
        if not path.exists():
            return SummarizerConfig()
        try:
            return SummarizerConfig.load_json_str(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as ex:
            raise ValueError(f"{path} is not valid JSON: {ex}") from ex
        except (TypeError, ValueError) as ex:
            raise ValueError(f"{path} is not a valid config: {ex}") from ex

    def clamp(self, sentences: int) -> int:
        return max(self.min_sentences, min(self.max_sentences, sentences))

    def dump(self) -> str:
        data = {
            "default_sentences": self.default_sentences,
            "min_sentences": self.min_sentences,
            "max_sentences": self.max_sentences,
            "export_filename": self.export_filename,
            "export_format": self.export_format,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
        }
        return json.dumps(data, indent=2)


def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(SummarizerConfig().dump())
