"""
Mission Module

Interactive command session and its prompt sources.
"""

from satellite_console.mission.prompts import ConsolePrompter, MenuPrompter
from satellite_console.mission.session import CommandSession

__all__ = ["CommandSession", "ConsolePrompter", "MenuPrompter"]
