"""
Streamlit Dashboard for FloodGuard

Interactive form for entering weather readings and viewing flood risk.
"""

import streamlit as st
import plotly.express as px
import sys
import os

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.observations import REGIONS, InvalidObservationError, parse_observation, validate_region
from src.risk_scoring import (
    MAX_RISK_SCORE,
    assess_observation,
    format_score,
    risk_color,
    risk_text_color,
    score_factors,
)

# Page configuration
st.set_page_config(
    page_title="FloodGuard",
    page_icon="🌊",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Title and description
st.title("🛡️ FloodGuard")
st.markdown("**Flood Risk Assessment and Safety Recommendations**")
st.markdown(
    "Enter weather conditions to get a flood risk assessment and safety "
    "recommendations for your area."
)

# Sidebar
st.sidebar.header("Weather Data Input")

with st.sidebar.form("observation_form"):
    region = st.selectbox(
        "Region",
        REGIONS,
        index=None,
        placeholder="Select Indian region"
    )
    rainfall = st.text_input("💧 Rainfall (mm/24hrs)", placeholder="e.g., 150")
    temperature = st.text_input("🌡️ Temperature (°C)", placeholder="e.g., 32")
    humidity = st.text_input("Humidity (%)", placeholder="e.g., 85")

    submit = st.form_submit_button("Predict Flood Risk", type="primary")

if submit:
    errors = []
    try:
        region_name = validate_region(region)
    except InvalidObservationError as e:
        errors.extend(e.errors)
    try:
        observation = parse_observation(rainfall, temperature, humidity)
    except InvalidObservationError as e:
        errors.extend(e.errors)

    if errors:
        st.session_state.input_errors = [e.message for e in errors]
    else:
        st.session_state.input_errors = []
        st.session_state.region = region_name
        st.session_state.observation = observation
        st.session_state.result = assess_observation(observation)
        st.session_state.factors = score_factors(
            observation.rainfall_mm,
            observation.temperature_c,
            observation.humidity_pct
        )

for message in st.session_state.get("input_errors", []):
    st.sidebar.error(message)

# Main content
if st.session_state.get("result") is not None:
    result = st.session_state.result
    factors = st.session_state.factors
    level = result.risk_level

    st.subheader("⚠️ Flood Risk Assessment")
    st.caption(f"Region: {st.session_state.region}")

    st.markdown(
        f"""
        <div style="background-color:{risk_color(level)};color:{risk_text_color(level)};
                    border-radius:0.5rem;padding:1rem;text-align:center;">
            <p style="margin:0;font-size:0.85rem;font-weight:500;text-transform:uppercase;">Risk Level</p>
            <p style="margin:0;font-size:2rem;font-weight:700;">{level.value.upper()}</p>
            <p style="margin:0.25rem 0 0 0;font-size:0.85rem;">Risk Score: {format_score(result.risk_score)}</p>
        </div>
        """,
        unsafe_allow_html=True
    )

    st.markdown("---")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("🛡️ Safety Recommendations")
        st.markdown("\n".join(f"- {item}" for item in result.advice))

    with col2:
        st.subheader("Score Breakdown")

        fig = px.bar(
            x=["Rainfall", "Humidity", "Temperature"],
            y=[factors.rainfall, factors.humidity, factors.temperature],
            labels={"x": "Factor", "y": "Points"},
            title=f"Contribution to Risk Score (max {MAX_RISK_SCORE})",
            color=[factors.rainfall, factors.humidity, factors.temperature],
            color_continuous_scale="Blues"
        )
        fig.update_layout(showlegend=False, coloraxis_showscale=False)
        st.plotly_chart(fig, use_container_width=True)

else:
    # Instructions
    st.info("👈 Fill in the form and click **Predict Flood Risk** to see results.")

    st.markdown("""
    ### About FloodGuard

    FloodGuard analyzes rainfall, temperature and humidity with a fixed,
    explainable rule table to estimate flood risk in flood-prone regions of India:

    - **Rainfall** over the last 24 hours contributes up to 40 points
    - **Humidity** contributes up to 25 points
    - **Temperature** contributes up to 15 points

    The total score places the conditions in one of four risk levels
    (low, moderate, high, severe), each with actionable safety recommendations.
    """)

# Footer
st.sidebar.markdown("---")
st.sidebar.markdown("""
**FloodGuard**
Version 1.0.0
Helping protect communities from floods.
""")
