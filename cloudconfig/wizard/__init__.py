"""Wizard module - interactive meta config setup."""
from cloudconfig.wizard.builder import InteractiveConfigBuilder, SessionState, generate
from cloudconfig.wizard.prompter import Prompter

__all__ = ["InteractiveConfigBuilder", "SessionState", "generate", "Prompter"]
