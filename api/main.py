"""
FastAPI REST API for FloodGuard

Provides RESTful endpoints for flood risk assessment.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Dict, Optional
from datetime import datetime
import pandas as pd
import logging
import sys
import os

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import get_settings
from src.observations import (
    REGIONS,
    InvalidObservationError,
    validate_observation,
    validate_region,
)
from src.risk_scoring import (
    MAX_RISK_SCORE,
    assess_frame,
    assess_observation,
    format_score,
    risk_color,
    score_factors,
    summarize,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="FloodGuard Flood Risk API",
    description="Rule-based flood risk assessment from rainfall, temperature and humidity",
    version="1.0.0"
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Pydantic models
class ObservationInput(BaseModel):
    region: str = Field(..., description="Region name from /api/v1/regions")
    rainfall_mm: float = Field(..., description="Rainfall over the last 24 hours (mm)")
    temperature_c: float = Field(..., description="Air temperature (°C)")
    humidity_pct: float = Field(..., description="Relative humidity (%)")


class FactorBreakdown(BaseModel):
    rainfall: int
    humidity: int
    temperature: int


class AssessmentResponse(BaseModel):
    region: str
    risk_level: str
    risk_score: int
    max_score: int
    score_label: str
    color: str
    factors: FactorBreakdown
    advice: List[str]
    timestamp: datetime


class BatchInput(BaseModel):
    observations: List[ObservationInput]


class BatchResponse(BaseModel):
    total_observations: int
    average_score: float
    risk_distribution: Dict[str, int]
    highest_risk_observations: List[Dict]
    timestamp: datetime


def _validation_error(e: InvalidObservationError, index: Optional[int] = None) -> HTTPException:
    errors = e.to_list()
    if index is not None:
        for error in errors:
            error["index"] = index
    return HTTPException(status_code=422, detail=errors)


# API Endpoints

@app.get("/")
def root():
    """API root endpoint"""
    return {
        "message": "FloodGuard Flood Risk API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/health",
            "regions": "/api/v1/regions",
            "risk_assessment": "/api/v1/risk/assess",
            "batch_assessment": "/api/v1/risk/batch"
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


@app.get("/api/v1/regions")
def list_regions():
    """Regions offered in the input form"""
    return {
        "count": len(REGIONS),
        "regions": list(REGIONS)
    }


@app.post("/api/v1/risk/assess", response_model=AssessmentResponse)
def assess_risk(payload: ObservationInput):
    """
    Assess flood risk for one set of weather readings

    Returns the risk level, score breakdown and safety advice.
    """
    try:
        region = validate_region(payload.region)
        observation = validate_observation(
            payload.rainfall_mm,
            payload.temperature_c,
            payload.humidity_pct
        )
    except InvalidObservationError as e:
        raise _validation_error(e)

    try:
        result = assess_observation(observation)
        factors = score_factors(
            observation.rainfall_mm,
            observation.temperature_c,
            observation.humidity_pct
        )

        logger.info(f"{region}: {result.risk_level.value} ({result.risk_score}/{MAX_RISK_SCORE})")

        return AssessmentResponse(
            region=region,
            risk_level=result.risk_level.value,
            risk_score=result.risk_score,
            max_score=MAX_RISK_SCORE,
            score_label=format_score(result.risk_score),
            color=risk_color(result.risk_level),
            factors=FactorBreakdown(
                rainfall=factors.rainfall,
                humidity=factors.humidity,
                temperature=factors.temperature
            ),
            advice=list(result.advice),
            timestamp=datetime.now()
        )

    except Exception as e:
        logger.error(f"Error assessing risk: {e}")
        raise HTTPException(status_code=500, detail=f"Error assessing risk: {str(e)}")


@app.post("/api/v1/risk/batch", response_model=BatchResponse)
def assess_batch(batch: BatchInput):
    """
    Assess flood risk across many observations

    Returns aggregate metrics and the highest-risk observations.
    """
    if not batch.observations:
        raise HTTPException(status_code=400, detail="No observations provided")

    rows = []
    for index, item in enumerate(batch.observations):
        try:
            region = validate_region(item.region)
            observation = validate_observation(
                item.rainfall_mm,
                item.temperature_c,
                item.humidity_pct
            )
        except InvalidObservationError as e:
            raise _validation_error(e, index)

        rows.append({
            "region": region,
            "rainfall_mm": observation.rainfall_mm,
            "temperature_c": observation.temperature_c,
            "humidity_pct": observation.humidity_pct
        })

    try:
        assessed = assess_frame(pd.DataFrame(rows))
        summary = summarize(assessed)

        highest_risk = [
            {
                "region": row["region"],
                "risk_score": int(row["risk_score"]),
                "risk_level": row["risk_level"]
            }
            for row in summary["highest_risk"]
        ]

        return BatchResponse(
            total_observations=summary["total"],
            average_score=summary["average_score"],
            risk_distribution=summary["risk_distribution"],
            highest_risk_observations=highest_risk,
            timestamp=datetime.now()
        )

    except Exception as e:
        logger.error(f"Error assessing batch: {e}")
        raise HTTPException(status_code=500, detail=f"Error assessing batch: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
