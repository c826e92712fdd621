"""
Employee Manager
================

Employee record management: a FastAPI + MongoDB CRUD API and a Streamlit UI.
"""
__version__ = "1.0.0"
