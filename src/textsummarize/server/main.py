from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from .models import SummarizeRequest, SummaryDTO, ExportRequest
from ..config import DEFAULT_CONFIG_PATH, SummarizerConfig
from ..exporter import MEDIA_TYPES, content_disposition, export_filename, render_summary
from ..parser import text_from_html
from ..summarizer import summarize_text
from typing import Optional
import logging

log = logging.getLogger(__name__)

FAILED = "Failed to generate summary. Please try again."


def create_app(cfg: Optional[SummarizerConfig] = None) -> FastAPI:
    cfg = cfg or SummarizerConfig.load(DEFAULT_CONFIG_PATH)

    app = FastAPI(title="TextSummarize", version="0.1")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # browser front-end is served separately
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = cfg

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.post("/summarize", response_model=SummaryDTO)
    def summarize(req: SummarizeRequest):
        try:
            text = text_from_html(req.text) if req.html else req.text
        except Exception:
            log.exception("html extraction failed")
            raise HTTPException(status_code=500, detail=FAILED)

        if not text.strip():
            log.info("No input text provided")
            raise HTTPException(status_code=400, detail="No input text provided")

        try:
            res = summarize_text(text, cfg.clamp(req.sentences))
        except Exception:
            log.exception("summary generation failed")
            raise HTTPException(status_code=500, detail=FAILED)

        log.info("summarized %d -> %d sentences", res.total_sentences, res.selected_sentences)
        return SummaryDTO(
            summary=res.summary,
            total_sentences=res.total_sentences,
            selected_sentences=res.selected_sentences,
            input_words=res.input_words,
            output_words=res.output_words,
            reduction_ratio=res.reduction_ratio,
            passthrough=res.passthrough,
        )

    @app.post("/export")
    def export(req: ExportRequest):
        filename = export_filename(req.filename or cfg.export_filename, req.fmt)
        return Response(
            content=render_summary(req.summary, req.fmt),
            media_type=MEDIA_TYPES[req.fmt],
            headers={"Content-Disposition": content_disposition(filename)},
        )

    return app