"""
Sports & Family Day registration site
Streamlit entry point
"""
import logging
import streamlit as st

from src.services.form_state_service import clear_form_state
from src.ui.home import render_home
from src.utils.logging_utils import configure_logging
from src.utils.settings import get_settings

logger = logging.getLogger(__name__)


# Streamlit page configuration
st.set_page_config(
    page_title="Sports & Family Day",
    page_icon="🏆",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def apply_custom_css():
    """Apply custom CSS styles."""
    st.markdown("""
        <style>
        /* Hide Streamlit chrome */
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        header, [data-testid="stHeader"] {
            visibility: hidden;
            height: 0;
        }

        [data-testid="stAppViewContainer"] > .main .block-container {
            padding-top: 1.5rem;
            max-width: 1100px;
        }

        /* Hero */
        .hero {
            background: linear-gradient(135deg, #1e3a8a 0%, #2563eb 55%, #f97316 100%);
            border-radius: 20px;
            padding: 56px 32px;
            text-align: center;
            color: #ffffff;
            margin-bottom: 24px;
        }

        .hero h1 {
            font-size: 2.6rem;
            letter-spacing: 0.08em;
            margin-bottom: 12px;
        }

        .hero-cta {
            display: inline-block;
            margin-top: 16px;
            padding: 12px 28px;
            border-radius: 999px;
            background: #f97316;
            color: #ffffff !important;
            font-weight: 700;
            text-decoration: none;
        }

        /* Highlights */
        .highlight-card {
            background: #f8fafc;
            border: 1px solid #e2e8f0;
            border-radius: 16px;
            padding: 20px;
            height: 100%;
        }

        .highlight-icon {
            font-size: 2rem;
        }

        .chip-list {
            display: flex;
            flex-wrap: wrap;
            gap: 6px;
        }

        .chip {
            background: #dbeafe;
            color: #1e3a8a;
            border-radius: 999px;
            padding: 2px 10px;
            font-size: 0.8rem;
        }

        /* Form sections */
        .form-section-header {
            display: flex;
            align-items: center;
            gap: 10px;
            border-bottom: 2px solid #e2e8f0;
            margin: 28px 0 12px 0;
        }

        .form-section-header h3 {
            margin: 0;
        }

        .section-icon {
            font-size: 1.4rem;
        }

        .field-error {
            color: #dc2626;
            font-size: 0.8rem;
            margin-top: -8px;
        }

        .declaration-box {
            background: #fff7ed;
            border-left: 4px solid #f97316;
            border-radius: 8px;
            padding: 12px 16px;
            font-size: 0.9rem;
        }

        /* Buttons */
        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
        }

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #2563eb 0%, #f97316 100%);
            border: none;
            color: white;
        }
        </style>
    """, unsafe_allow_html=True)


def render_page():
    """Render the landing page inside an error boundary."""
    try:
        render_home()
    except Exception as e:
        # Error boundary
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong. Please try again.")

        with st.expander("🔍 Error details"):
            st.code(str(e))

        if st.button("Start over"):
            clear_form_state()
            st.rerun()


def main():
    """Application entry point."""
    try:
        configure_logging(get_settings().log_level)

        apply_custom_css()
        render_page()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("The application hit an error. Please refresh the page.")
        st.code(str(e))

        if st.button("🔄 Refresh"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
