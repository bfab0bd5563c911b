"""Streamlit user interface for Sentilyzer."""
