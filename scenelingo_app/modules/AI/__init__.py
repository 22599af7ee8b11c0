# File: scenelingo_app/modules/AI/__init__.py
"""Generative vocabulary and illustration provider (Gemini)."""
