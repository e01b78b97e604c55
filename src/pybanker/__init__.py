"""Scoring engine for the Banker golf wagering game."""
