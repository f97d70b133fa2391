"""Ensemble helpers: weighted averaging, condition voting and confidence scoring."""