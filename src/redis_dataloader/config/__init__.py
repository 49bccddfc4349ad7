"""Config – env-based loader settings and validation errors."""
