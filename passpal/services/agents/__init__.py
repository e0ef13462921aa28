"""Analysis agents and their catalog."""

from passpal.services.agents.base import Agent
from passpal.services.agents.character_frequency import CharacterFrequencyAgent
from passpal.services.agents.charset_frequency import CharsetFrequencyAgent
from passpal.services.agents.charset_position import CharsetPositionAgent
from passpal.services.agents.hashcat_mask import HashcatMaskFrequencyAgent
from passpal.services.agents.length_frequency import LengthFrequencyAgent
from passpal.services.agents.registry import AgentRegistry
from passpal.services.agents.symbol_frequency import SymbolFrequencyAgent
from passpal.services.agents.word_frequency import BaseWordFrequencyAgent, WordFrequencyAgent

__all__ = [
    "Agent",
    "AgentRegistry",
    "WordFrequencyAgent",
    "BaseWordFrequencyAgent",
    "LengthFrequencyAgent",
    "CharsetFrequencyAgent",
    "HashcatMaskFrequencyAgent",
    "CharsetPositionAgent",
    "CharacterFrequencyAgent",
    "SymbolFrequencyAgent",
]
