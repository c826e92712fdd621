"""
UI Package
==========

Streamlit single-page frontend for the employee API.
"""
