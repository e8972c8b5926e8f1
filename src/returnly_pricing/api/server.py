"""FastAPI server — pricing endpoints for checkout and admin order creation.

Run with:
    uvicorn returnly_pricing.api.server:app --reload --port 8000

Or:
    python -m returnly_pricing.api.server

Endpoints:
    GET  /health              — liveness
    GET  /                    — service info and active pricing model
    GET  /schema              — JSON Schema for PricingConfig
    GET  /config              — active pricing config
    POST /quote               — price one order (full itemized breakdown + receipt)
    POST /quote/compare       — price one order under every pricing model
    POST /quote/sensitivity   — rate sweep → tornado data

Money fields are serialized as decimal strings ("25.99").
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from returnly_pricing.analysis.sensitivity import run_sensitivity
from returnly_pricing.api.narrative import generate_comparison, generate_receipt
from returnly_pricing.config.loader import resolve_pricing_config
from returnly_pricing.config.pricing import PricingConfig
from returnly_pricing.config.settings import PricingSettings, get_settings
from returnly_pricing.engine.orchestrator import compare_models, quote
from returnly_pricing.errors import InvalidRequest, ReconciliationMismatch
from returnly_pricing.logging_setup import setup_logging
from returnly_pricing.models.request import PricingRequest, TaxContext
from returnly_pricing.models.results import PaymentBreakdownView
from returnly_pricing.models.tiers import PricingModelName

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class QuoteRequest(BaseModel):
    """Request body for /quote."""
    request: PricingRequest
    tax: TaxContext = Field(default_factory=TaxContext)
    model: PricingModelName | None = Field(
        default=None,
        description="Override the configured pricing model for this quote.",
    )


class QuoteResponse(BaseModel):
    breakdown: PaymentBreakdownView
    receipt: str = ""


class CompareRequest(BaseModel):
    request: PricingRequest
    tax: TaxContext = Field(default_factory=TaxContext)


class CompareResponse(BaseModel):
    results: dict[str, PaymentBreakdownView]
    comparison: str


class SweepParam(BaseModel):
    name: str
    path: str = Field(description="Dot-path into PricingConfig, e.g. 'fees.base_price'")
    low_pct: float = Field(default=-0.10, ge=-1.0, le=10.0)
    high_pct: float = Field(default=0.10, ge=-1.0, le=10.0)


class SensitivityRequest(BaseModel):
    request: PricingRequest
    sweep_params: list[SweepParam] | None = Field(
        default=None,
        description="Optional override of the default sweep set.",
    )


# ═══════════════════════════════════════════════════════════════════════════
# App factory
# ═══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: PricingSettings | None = None,
    config: PricingConfig | None = None,
) -> FastAPI:
    """Build the app with one immutable config shared by every request.

    Configures root logging from ``settings`` so every launch path logs the same way.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.json_logs, settings.environment)
    config = config or resolve_pricing_config(settings)
    strict = settings.reconciliation_is_strict

    app = FastAPI(
        title="Returnly Pricing API",
        version="1.0",
        description="Itemized pickup pricing with driver / company revenue split.",
    )
    app.state.settings = settings
    app.state.pricing_config = config

    @app.exception_handler(InvalidRequest)
    async def _invalid_request(request: Request, exc: InvalidRequest) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"error": type(exc).__name__, "field": exc.field, "detail": str(exc)},
        )

    @app.exception_handler(ReconciliationMismatch)
    async def _reconciliation(request: Request, exc: ReconciliationMismatch) -> JSONResponse:
        logger.error("Refusing quote with unbalanced ledgers: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"error": "ReconciliationMismatch", "detail": "Pricing ledgers do not reconcile"},
        )

    @app.get("/health")
    def health_check():
        return {"status": "ok", "config_version": config.version}

    @app.get("/")
    def root():
        return {
            "name": "Returnly Pricing API",
            "version": "1.0",
            "pricing_model": config.model,
            "docs": "GET /docs (interactive Swagger UI)",
        }

    @app.get("/schema")
    def get_schema():
        """Full JSON Schema for PricingConfig."""
        return PricingConfig.model_json_schema()

    @app.get("/config")
    def get_config():
        """Active pricing config as JSON."""
        return config.model_dump(mode="json")

    @app.post("/quote", response_model=QuoteResponse)
    def post_quote(req: QuoteRequest):
        """Price one order.  Bad input → 422 with the offending field."""
        view = quote(req.request, req.tax, config, model=req.model, strict=strict)
        return QuoteResponse(breakdown=view, receipt=generate_receipt(view))

    @app.post("/quote/compare", response_model=CompareResponse)
    def post_compare(req: CompareRequest):
        """Price the same order under the dynamic and flat-tier models."""
        views = compare_models(req.request, req.tax, config, strict=strict)
        return CompareResponse(results=views, comparison=generate_comparison(views))

    @app.post("/quote/sensitivity")
    def post_sensitivity(req: SensitivityRequest) -> dict[str, Any]:
        """One-at-a-time rate sweep around the active config."""
        sweeps = None
        if req.sweep_params:
            sweeps = [(p.name, p.path, p.low_pct, p.high_pct) for p in req.sweep_params]
        result = run_sensitivity(req.request, config, sweeps, strict=strict)
        return {
            "base_total": str(result.base_total),
            "base_driver": str(result.base_driver),
            "base_company": str(result.base_company),
            "bars": [
                {key: (str(val) if not isinstance(val, str) else val) for key, val in asdict(bar).items()}
                for bar in result.bars
            ],
        }

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
