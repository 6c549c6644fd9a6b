# ai_lab/dashboard/forecast_panel.py

import streamlit as st
import plotly.graph_objects as go

from ai_lab.dashboard.utils import DEFAULT_CHART_HEIGHT, get_ui_logger
from ai_lab.data import PriceHistory
from ai_lab.forecasting import ForecastResult, forecast
from ai_lab.utils.config_loader import ForecastConfig
from ai_lab.validation import InputSanitizer

# -------------------------------
# Logging configuration
# -------------------------------
logger = get_ui_logger(__name__)

HISTORY_KEY = "price_history"
HORIZON_KEY = "forecast_horizon"


def build_forecast_figure(result: ForecastResult, date_format: str = "%Y-%m-%d") -> go.Figure:
    """
    Actual vs. predicted line chart.

    The predicted trace spans history and the future tail and is dashed;
    the actual trace stops at the last observation.
    """
    frame = result.to_frame(date_format=date_format)
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=frame["date"],
        y=frame["actual"],
        mode="lines",
        name="Actual",
        line=dict(color="black"),
        connectgaps=False,
    ))
    fig.add_trace(go.Scatter(
        x=frame["date"],
        y=frame["predicted"],
        mode="lines",
        name="Predicted",
        line=dict(color="royalblue", dash="dash"),
    ))

    fig.update_layout(
        xaxis_title="Date",
        yaxis_title="Close",
        template="plotly_white",
        height=DEFAULT_CHART_HEIGHT,
        margin=dict(l=0, r=16, t=8, b=8),
        legend=dict(orientation="h"),
    )
    return fig


# -------------------------------
# Forecast Panel Class
# -------------------------------
class ForecastPanel:
    """
    Stock price predictor: CSV upload, horizon slider and trend chart.

    The current observation set and horizon live in st.session_state so
    they survive reruns; the forecast itself is recomputed on every render.
    """

    def __init__(self, config: ForecastConfig):
        self.config = config
        if HISTORY_KEY not in st.session_state:
            st.session_state[HISTORY_KEY] = PriceHistory()
        if HORIZON_KEY not in st.session_state:
            st.session_state[HORIZON_KEY] = config.default_horizon

    @property
    def history(self) -> PriceHistory:
        return st.session_state[HISTORY_KEY]

    @property
    def horizon(self) -> int:
        h = InputSanitizer.sanitize_horizon(
            st.session_state[HORIZON_KEY],
            min_days=self.config.min_horizon,
            max_days=self.config.max_horizon,
        )
        return self.config.default_horizon if h is None else h

    def render_controls(self) -> None:
        col_file, col_horizon = st.columns(2)

        with col_file:
            upload = st.file_uploader("Upload CSV", type=["csv"])
            if upload is not None and st.session_state.get("last_upload") != upload.file_id:
                st.session_state["last_upload"] = upload.file_id
                if self.history.load_csv(upload):
                    logger.info(f"Loaded {len(self.history)} observations from {upload.name}")
                else:
                    st.warning(f"No valid date/close rows in {upload.name}; keeping current data.")

        with col_horizon:
            st.slider(
                "Forecast horizon (days)",
                min_value=self.config.min_horizon,
                max_value=self.config.max_horizon,
                step=1,
                key=HORIZON_KEY,
            )
            st.caption(f"{self.horizon} days")

    def render_chart(self, result: ForecastResult) -> None:
        if not result.combined:
            st.info("No data loaded. Upload a CSV or load the sample data.")
            return
        st.plotly_chart(
            build_forecast_figure(result, date_format=self.config.date_format),
            use_container_width=True,
        )

    def render_footer(self) -> None:
        col_sample, col_clear = st.columns(2)
        if col_sample.button("Load Sample Data"):
            self.history.reset_to_sample()
            st.rerun()
        if col_clear.button("Clear"):
            self.history.clear()
            st.rerun()

    def render_forecast(self) -> ForecastResult:
        """
        Main method to render forecast panel.

        Returns:
            ForecastResult: The forecast that was drawn.
        """
        st.subheader("Stock Price Predictor")
        self.render_controls()

        result = forecast(self.history.observations, self.horizon)
        self.render_chart(result)
        st.caption(f"{result.model_summary()}. This is a teaching demo; not financial advice.")

        self.render_footer()
        return result
