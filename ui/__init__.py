"""Streamlit UI building blocks."""
