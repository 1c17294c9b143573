"""Core utilities and shared primitives.

Modules in this package should be framework-agnostic where possible and
focused on configuration, validation, and small reusable helpers. The
FastAPI-bound pieces live in ``http`` and ``middleware``.
"""
