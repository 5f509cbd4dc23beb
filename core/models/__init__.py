"""
Módulo de modelos core.

Solo contiene bases abstractas y choices; no crea tablas propias.
"""
from .base import Status, TimeStampedModel

__all__ = ["Status", "TimeStampedModel"]
