"""Utility helpers for the hexamer classifier."""
