"""Configuration module."""

from speech.config.constants import SPEECH, SpeechConstants
from speech.config.settings import SpeechSettings, get_settings

__all__ = ["SPEECH", "SpeechConstants", "SpeechSettings", "get_settings"]
