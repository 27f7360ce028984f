"""Terminal front end for FitTrack."""
