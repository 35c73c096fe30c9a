"""Scoring module for HR Pulse.

Implements the survey scoring pipeline:
  responses × question weights → weighted score → risk tier
  score history → trailing-window trend
"""
