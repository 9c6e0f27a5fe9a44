from __future__ import annotations
from pathlib import Path
from typing import Union
from urllib.parse import quote
import json
import re
from .summarizer import SummaryResult

FORMATS = ("txt", "json")
MEDIA_TYPES = {"txt": "text/plain; charset=utf-8", "json": "application/json"}


def render_summary(summary: Union[SummaryResult, str], fmt: str = "txt") -> str:
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported export format {fmt!r} (expected one of: {', '.join(FORMATS)})")
    text = summary.summary if isinstance(summary, SummaryResult) else summary
    if fmt == "txt":
        return text

    data = {"summary": text}
    if isinstance(summary, SummaryResult):
        data.update({
            "total_sentences": summary.total_sentences,
            "selected_sentences": summary.selected_sentences,
            "input_words": summary.input_words,
            "output_words": summary.output_words,
            "reduction_ratio": round(summary.reduction_ratio, 4),
        })
    return json.dumps(data, indent=2, ensure_ascii=False)


_UNSAFE = re.compile(r'["\\\x00-\x1f\x7f]')


def export_filename(stem: str, fmt: str) -> str:
    stem = _UNSAFE.sub("", Path(stem).name) or "summary"
    return stem if stem.endswith(f".{fmt}") else f"{stem}.{fmt}"


def content_disposition(filename: str) -> str:
    """Attachment header value; non-ASCII names also get an RFC 5987 `filename*`."""
    try:
        filename.encode("ascii")
    except UnicodeEncodeError:
        fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_")
        return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename)}'
    return f'attachment; filename="{filename}"'


def export_summary(summary: Union[SummaryResult, str], path: Path, fmt: str = "txt") -> Path:
    """Write the rendered summary to `path`, creating parent directories."""
    content = render_summary(summary, fmt)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
