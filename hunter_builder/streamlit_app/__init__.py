"""Streamlit front end for the stats panels."""
