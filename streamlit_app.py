"""
# FETP Scenario Planner

This is the main entry point for the Streamlit application.

It redirects to the application page in app/main.py, which owns page
configuration and tab routing.
"""

import streamlit as st

# The main app is not in the root script; hand over to it.
st.switch_page("app/main.py")
