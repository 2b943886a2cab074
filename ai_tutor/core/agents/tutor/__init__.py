"""
Tutor generation agents.
"""
from .generator import TutorGenerator
from .chat_agent import TutorChatAgent

__all__ = [
    "TutorGenerator",
    "TutorChatAgent",
]
