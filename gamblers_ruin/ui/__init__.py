"""User-facing front ends for the simulation engine."""
