import os

# Plots are saved to files, never shown
os.environ.setdefault("MPLBACKEND", "Agg")
