"""Streamlit front end for FitTrack (run with `fittrack ui`)."""
