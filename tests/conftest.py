import os

# Figures are built but never shown during tests
os.environ.setdefault("MPLBACKEND", "Agg")
