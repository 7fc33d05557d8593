"""Parametric shape generators. Each module registers one shape kind."""
