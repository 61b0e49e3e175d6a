"""
`how` answers "how do I..." questions with commands for the current terminal,
using one of several interchangeable LLM providers.
"""

__version__ = "0.1.0"
