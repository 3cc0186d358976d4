"""FastAPI application factory."""

import logging
from dataclasses import asdict
from typing import Literal

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from nutrition_labeling.api.schemas import (
    AllergenDetectionPayload,
    CompliancePayload,
    FormulationPayload,
)
from nutrition_labeling.app_logging import configure_logging
from nutrition_labeling.containers import AppContainer
from nutrition_labeling.domain.compliance import ComplianceReport
from nutrition_labeling.domain.formula import FormulaStyle
from nutrition_labeling.domain.labels import NutritionLabel
from nutrition_labeling.domain.nutrition import InvalidFormulationError
from nutrition_labeling.services.allergen_detection import (
    detect_allergens,
    present_allergen_labels,
)
from nutrition_labeling.services.exports import (
    formula_csv,
    formula_text,
    per_100g_csv,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=container.settings.app_title)
    app.state.container = container

    @app.exception_handler(InvalidFormulationError)
    async def invalid_formulation_handler(
        request: Request, exc: InvalidFormulationError
    ) -> JSONResponse:
        logger.warning("Rejected formulation on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition/calculate")
    async def calculate(
        payload: FormulationPayload, request: Request
    ) -> dict[str, object]:
        """Calculate a rounded Nutrition Facts panel and declarations."""
        state_container: AppContainer = request.app.state.container
        label = state_container.label_service.calculate(payload.to_domain())
        return _serialize_label(label)

    @app.post("/nutrition/per-100g", response_model=None)
    async def per_100g(
        payload: FormulationPayload,
        request: Request,
        export_format: Literal["json", "csv"] = Query("json", alias="format"),
    ) -> dict[str, object] | Response:
        """Return batch nutrition normalized to a 100 g portion."""
        state_container: AppContainer = request.app.state.container
        report = state_container.label_service.per_100g(payload.to_domain())
        if export_format == "csv":
            return _csv_response(per_100g_csv(report), "100g-nutrition.csv")
        return {
            "nutrition_per_100g": dict(report.nutrition),
            "serving_size_g": report.serving_size_g,
        }

    @app.post("/nutrition/compliance")
    async def compliance(
        payload: CompliancePayload, request: Request
    ) -> dict[str, object]:
        """Check serving declarations and nutrient content claims."""
        state_container: AppContainer = request.app.state.container
        report = state_container.label_service.check_compliance(
            payload.to_domain(),
            servings_per_container=payload.servings_per_container,
            claims=payload.claims,
        )
        return _serialize_compliance(report)

    @app.post("/nutrition/formula", response_model=None)
    async def formula(
        payload: FormulationPayload,
        request: Request,
        style: FormulaStyle = "percentage",
        export_format: Literal["json", "text", "csv"] = Query("json", alias="format"),
    ) -> dict[str, object] | Response:
        """Return each ingredient's share of the batch as data, text or CSV."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.label_service.formula(payload.to_domain())
        if export_format == "text":
            return PlainTextResponse(formula_text(entries, style))
        if export_format == "csv":
            return _csv_response(formula_csv(entries, style), "formula.csv")
        return {"style": style, "entries": [asdict(entry) for entry in entries]}

    @app.post("/allergens/detect")
    async def allergens_detect(payload: AllergenDetectionPayload) -> dict[str, object]:
        """Suggest allergen flags for a food description."""
        summary = detect_allergens(
            payload.description,
            food_category=payload.food_category,
            brand_name=payload.brand_name,
        )
        return {
            "allergens": asdict(summary),
            "labels": present_allergen_labels(summary),
        }

    return app


def _serialize_label(label: NutritionLabel) -> dict[str, object]:
    return {
        "nutrition": {
            "raw": asdict(label.raw),
            "rounded": asdict(label.rounded),
            "daily_values": dict(label.daily_values),
        },
        "allergens": asdict(label.allergens),
        "ingredient_statement": label.ingredient_statement,
        "allergen_statement": label.allergen_statement,
    }


def _serialize_compliance(report: ComplianceReport) -> dict[str, object]:
    return {
        "status": report.status.value,
        "errors_count": report.errors_count,
        "warnings_count": report.warnings_count,
        "checks": [
            {**asdict(check), "severity": check.severity.value}
            for check in report.checks
        ],
    }


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
