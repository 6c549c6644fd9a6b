# ai_lab/dashboard/ui_components.py

import streamlit as st
from ai_lab.dashboard.utils import get_ui_logger

# ==========================================================
# Logging configuration
# ==========================================================
logger = get_ui_logger(__name__)

PANEL_OPTIONS = ["Stock Predictor", "Tweet Sentiment"]


# ==========================================================
# Sidebar UI Components Class
# ==========================================================
class SidebarUI:
    """
    Handles the Streamlit sidebar for the AI Lab dashboard.

    Features:
    - Panel selection (stock predictor or tweet sentiment)
    - Short description of the selected demo
    """

    def __init__(self):
        self.panel_option: str = PANEL_OPTIONS[0]

    def render(self) -> str:
        """
        Render the sidebar and return the selected panel.

        Returns:
            str: One of PANEL_OPTIONS.
        """
        st.sidebar.title("AI Lab")

        self.panel_option = st.sidebar.radio("Choose Demo", options=PANEL_OPTIONS)

        if self.panel_option == "Stock Predictor":
            st.sidebar.markdown(
                "Simple linear regression over closing prices. "
                "Bring your own CSV (date, close)."
            )
        else:
            st.sidebar.markdown(
                "Paste tweets (one per line). Lines are treated independently."
            )

        logger.info(f"Panel selected: {self.panel_option}")
        return self.panel_option


# ==========================================================
# Function to initialize and render sidebar
# ==========================================================
def render_sidebar() -> str:
    """
    Helper function to render the sidebar and return the selected panel.
    """
    sidebar = SidebarUI()
    return sidebar.render()
