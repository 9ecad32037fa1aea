"""
Service layer helpers that combine daily windows with a clock source.
"""

from .schedule import ScheduleService

__all__ = ["ScheduleService"]
