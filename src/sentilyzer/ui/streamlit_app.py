"""Streamlit UI for Sentilyzer."""

import html
import logging

import pandas as pd
import plotly.express as px
import streamlit as st

from sentilyzer.core.config import settings
from sentilyzer.core.constants import FileConstants, UIConstants, ExportConstants
from sentilyzer.core.exceptions import AnalysisInProgressError
from sentilyzer.core.highlight import highlight_keywords
from sentilyzer.core.models import SentimentType
from sentilyzer.core.scoring import compute_batch_stats, sentiment_distribution
from sentilyzer.core.session import AnalysisSession
from sentilyzer.services.llm import LLMServiceFactory
from sentilyzer.utils.data_prep import export_filename, results_to_csv, results_to_json
from sentilyzer.utils.text_source import decode_upload, normalize_file_content, normalize_text_input

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO),
                    format=FileConstants.LOG_FORMAT)
logger = logging.getLogger(__name__)


def _highlighted_html(text, keywords):
    parts = []
    for span in highlight_keywords(text, keywords):
        escaped = html.escape(span.text)
        if span.is_keyword:
            parts.append(f"<mark style='background-color:#fef08a'>{escaped}</mark>")
        else:
            parts.append(escaped)
    return "".join(parts)


def _get_session() -> AnalysisSession:
    if "analysis" not in st.session_state:
        st.session_state["analysis"] = AnalysisSession()
    return st.session_state["analysis"]


def _analyze(texts):
    session = _get_session()
    try:
        with st.spinner(f"Analyzing {len(texts)} text(s)..."):
            session.run(texts, llm_service)
    except AnalysisInProgressError:
        st.warning("An analysis is already running. Please wait for it to finish.")


def render_input_section():
    session = _get_session()
    text_tab, file_tab = st.tabs(["Direct Text Input", "Batch File Upload"])

    with text_tab:
        input_text = st.text_area("Text", placeholder=UIConstants.TEXT_PLACEHOLDER,
                                  height=160, label_visibility="collapsed", key="input_text")
        texts = normalize_text_input(input_text)
        if st.button("Analyze Text", disabled=session.in_flight, key="analyze_text"):
            _analyze(texts)

    with file_tab:
        uploaded = st.file_uploader(
            "Click to upload TXT or CSV",
            type=FileConstants.ACCEPTED_UPLOAD_TYPES,
            help="One entry per line. Only the first 20 lines are analyzed."
        )
        if uploaded is not None:
            lines = normalize_file_content(decode_upload(uploaded.getvalue()))
            st.caption(f"{uploaded.name} · {len(lines)} items ready")
            if st.button("Process Batch", disabled=not lines or session.in_flight, key="analyze_file"):
                _analyze(lines)


def render_dashboard(results):
    stats = compute_batch_stats(results)

    header, csv_col, json_col = st.columns([4, 1, 1])
    with header:
        st.subheader("Analysis Overview")
    with csv_col:
        st.download_button("CSV", results_to_csv(results), file_name=export_filename("csv"),
                           mime=ExportConstants.CSV_MIME)
    with json_col:
        st.download_button("JSON", results_to_json(results), file_name=export_filename("json"),
                           mime=ExportConstants.JSON_MIME)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total Analyzed", stats.total)
    with col2:
        st.metric("Avg. Confidence", f"{stats.avg_confidence:.1f}%")
    with col3:
        st.metric("Dominant Sentiment", stats.dominant.value)

    rows = sentiment_distribution(stats)
    pie_col, bar_col = st.columns(2)
    with pie_col:
        st.caption("Sentiment Distribution")
        if rows:
            df = pd.DataFrame(rows)
            fig = px.pie(df, names="name", values="value", hole=0.5, color="name",
                         color_discrete_map=UIConstants.SENTIMENT_COLORS)
            fig.update_layout(margin=dict(t=10, b=10, l=10, r=10), height=260)
            st.plotly_chart(fig, use_container_width=True)
    with bar_col:
        st.caption("Count by Category")
        counts = pd.DataFrame(
            {"Count": [stats.counts[s] for s in SentimentType]},
            index=[s.value for s in SentimentType]
        )
        st.bar_chart(counts)


def render_result_list(results):
    st.subheader(f"Detailed Analysis ({len(results)})")
    for result in results:
        with st.container(border=True):
            label_col, conf_col = st.columns([3, 1])
            with label_col:
                icon = UIConstants.SENTIMENT_ICONS[result.sentiment.value]
                color = UIConstants.SENTIMENT_COLORS[result.sentiment.value]
                st.markdown(f"{icon} <span style='color:{color};font-weight:600'>{result.sentiment.value}</span>",
                            unsafe_allow_html=True)
            with conf_col:
                st.progress(result.confidence, text=f"{result.confidence * 100:.0f}% confidence")
            st.markdown(_highlighted_html(result.original_text, result.keywords), unsafe_allow_html=True)
            if result.keywords:
                st.caption("  ".join(f"#{k}" for k in result.keywords))


# Page configuration
st.set_page_config(
    page_title="Sentilyzer — AI Sentiment Analyzer",
    page_icon="✨",
    layout="wide"
)

# Initialize services
llm_service = LLMServiceFactory.create()

st.title("✨ Unlock the Emotion in Text")
st.write("Upload customer reviews, feedback, or any text to instantly analyze sentiment, "
         "calculate confidence scores, and extract driving keywords using AI.")

render_input_section()

analysis = _get_session()
if analysis.error:
    st.error(analysis.error)

if analysis.results:
    st.divider()
    render_dashboard(analysis.results)
    st.divider()
    render_result_list(analysis.results)
