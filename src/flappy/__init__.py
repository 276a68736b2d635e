"""
flappy: single player Flappy Bird built on pygame.
"""

__version__ = "0.2.0"
