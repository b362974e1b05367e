"""
pygame platform layer: window, input mapping and frame pacing.
"""

from .window import ArcadeWindow, KEY_DIRECTIONS

__all__ = ['ArcadeWindow', 'KEY_DIRECTIONS']
