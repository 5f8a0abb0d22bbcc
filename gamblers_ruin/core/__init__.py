"""Simulation and estimation core."""
