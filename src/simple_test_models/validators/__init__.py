"""Validation for assembled models.

- model: entity counts, boundary/target resolution, area accounting
"""
