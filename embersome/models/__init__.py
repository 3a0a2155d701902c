"""
Models Package

Exports all models for easy importing.
"""

from embersome.models.submission import Variant, APPLICATION, BOOKING, VARIANTS, REQUIRED_FIELDS
from embersome.models.session import Session

__all__ = ['Variant', 'APPLICATION', 'BOOKING', 'VARIANTS', 'REQUIRED_FIELDS', 'Session']
