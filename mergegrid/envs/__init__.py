# -*- coding: utf-8 -*-
"""
Headless session for the sliding-tile merging game.

This module provides the `GameSession` class, which keeps the board, the score and the game-over flag of one game.
"""

from .session import GameOverError, GameSession, GameState, StepResult

__all__ = ["GameSession", "GameState", "StepResult", "GameOverError"]
