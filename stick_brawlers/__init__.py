"""
Stick Brawlers
==============
Two-player local stick-figure fighting game on pygame.
"""

__version__ = "1.0.0"
