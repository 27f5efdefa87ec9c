"""
Flask web server for SHRED eligibility checks.

Routes
──────
POST /api/analyze   Research + prompt + Claude judgment (JSON)
POST /api/prompt    Research + prompt only, no model call (JSON)
GET  /api/health    Which remote services are configured (JSON)
"""

from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from config.settings import Settings
from shred.analyzer import AnalysisOrchestrator, build_orchestrator
from shred.errors import ValidationError
from shred.prompts import PromptVariant

logger = logging.getLogger(__name__)


def _request_fields() -> tuple[object, str, Optional[str]]:
    """Pull (task_description, company_context, search_depth) from the JSON body."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    return (
        body.get("task_description"),
        body.get("company_context") or "",
        body.get("search_depth"),
    )


def create_app(
    settings: Optional[Settings] = None,
    orchestrator: Optional[AnalysisOrchestrator] = None,
) -> Flask:
    """Build the Flask app.

    Args:
        settings: Process configuration; read from the environment if omitted.
        orchestrator: Analysis pipeline; built from *settings* if omitted.
    """
    settings = settings or Settings()
    orchestrator = orchestrator or build_orchestrator(settings, PromptVariant.CRITICAL)

    app = Flask(__name__)

    # ── Analysis API ───────────────────────────────────────────────────────

    @app.route("/api/analyze", methods=["POST"])
    def analyze():
        """Run the full analysis.

        ``analysis_prompt`` is only populated when the Claude call failed.
        """
        task_description, company_context, search_depth = _request_fields()
        try:
            result = orchestrator.analyze(task_description, company_context, search_depth)
        except ValidationError as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:
            logger.exception("Analysis error")
            return jsonify({"error": "Analysis failed", "details": str(exc)}), 500

        return jsonify(
            {
                "success": True,
                "task_description": result.task_description,
                "company_context": result.company_context,
                "shred_research": result.research_blob,
                "claude_analysis": result.model_output,
                "claude_error": result.model_error,
                "analysis_prompt": result.fallback_prompt,
            }
        )

    @app.route("/api/prompt", methods=["POST"])
    def prompt():
        """Return the research and the basic prompt without calling Claude."""
        task_description, company_context, search_depth = _request_fields()
        try:
            prepared = orchestrator.prepare(
                task_description, company_context, search_depth, variant=PromptVariant.BASIC,
            )
        except ValidationError as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:
            logger.exception("Prompt preparation error")
            return jsonify({"error": "Analysis failed", "details": str(exc)}), 500

        return jsonify(
            {
                "success": True,
                "task_description": prepared.task_description,
                "company_context": prepared.company_context,
                "shred_research": prepared.research_blob,
                "analysis_prompt": prepared.prompt,
            }
        )

    # ── Health ─────────────────────────────────────────────────────────────

    @app.route("/api/health")
    def health():
        return jsonify(
            {
                "status": "ok",
                "google_configured": settings.search_configured,
                "claude_configured": settings.inference_configured,
            }
        )

    return app


# ── Entry point ────────────────────────────────────────────────────────────

def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    settings = Settings()
    logger.info(
        "SHRED web server on http://localhost:%d (Google configured: %s, Claude configured: %s)",
        settings.port,
        settings.search_configured,
        settings.inference_configured,
    )
    create_app(settings).run(debug=settings.debug, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
