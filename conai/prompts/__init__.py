"""Prompt Construction Package"""

from conai.prompts.builder import Prompt, PromptBuilder, MESSAGE_DELIMITER

__all__ = ["Prompt", "PromptBuilder", "MESSAGE_DELIMITER"]
