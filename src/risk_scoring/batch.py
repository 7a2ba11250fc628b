"""
Batch Risk Assessment

Apply the flood risk rules to a table of observations and summarize the results.
"""

import pandas as pd
import numpy as np
from typing import Dict, List
import logging

from .models import RiskLevel
from .risk_assessor import classify, score_factors

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["rainfall_mm", "temperature_c", "humidity_pct"]


def assess_frame(observations: pd.DataFrame) -> pd.DataFrame:
    """
    Score every row of an observation table

    Args:
        observations: DataFrame with rainfall_mm, temperature_c and humidity_pct
            columns. Other columns (e.g. region) are carried through.

    Returns:
        Copy of the input with rainfall_points, humidity_points,
        temperature_points, risk_score and risk_level columns added
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in observations.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    df = observations.copy()

    if df.empty:
        for col in ["rainfall_points", "humidity_points", "temperature_points", "risk_score"]:
            df[col] = pd.Series(dtype="int64")
        df["risk_level"] = pd.Series(dtype="object")
        return df

    factors = [
        score_factors(row.rainfall_mm, row.temperature_c, row.humidity_pct)
        for row in df[REQUIRED_COLUMNS].itertuples(index=False)
    ]

    df["rainfall_points"] = [f.rainfall for f in factors]
    df["humidity_points"] = [f.humidity for f in factors]
    df["temperature_points"] = [f.temperature for f in factors]
    df["risk_score"] = [f.total for f in factors]
    df["risk_level"] = [classify(f.total).value for f in factors]

    logger.info(f"Assessed {len(df)} observations")

    return df


def summarize(assessed: pd.DataFrame, top_n: int = 5) -> Dict:
    """
    Aggregate metrics for an assessed table

    Returns:
        Dictionary with total, average_score, risk_distribution (all four
        levels, zero-filled) and highest_risk (top_n rows by score)
    """
    counts = assessed["risk_level"].value_counts() if not assessed.empty else pd.Series(dtype="int64")
    risk_distribution = {
        level.value: int(counts.get(level.value, 0)) for level in RiskLevel
    }

    if assessed.empty:
        average_score = 0.0
        highest_risk: List[Dict] = []
    else:
        average_score = float(np.round(assessed["risk_score"].mean(), 1))
        highest_risk = (
            assessed.sort_values("risk_score", ascending=False, kind="stable")
            .head(top_n)
            .to_dict(orient="records")
        )

    return {
        "total": len(assessed),
        "average_score": average_score,
        "risk_distribution": risk_distribution,
        "highest_risk": highest_risk,
    }
