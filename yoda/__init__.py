"""
Your Yoda

Schedule journaling service with persona letters
- Schedules with emotions and a chosen sender persona
- Template letters generated on the schedule's date
- Per-user letter inbox with read tracking
"""

__version__ = "1.0.0"
__author__ = "Your Yoda Team"
