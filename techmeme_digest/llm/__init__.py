"""Gemini client helpers."""
