"""
Scramble - Word scramble game engine

Players form new words from the letters of a randomly chosen root word.
The engine provides:
- Game state management
- Submission validation (originality, composability, legitimacy)
- Scoring
- Pluggable dictionaries and root word pools
"""

__version__ = "0.1.0"
