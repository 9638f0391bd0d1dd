"""Fitness assessment backend: scoring, leaderboards and adaptive training plans."""
