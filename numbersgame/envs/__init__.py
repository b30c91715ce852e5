# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `NumbersGame` class, which holds the game board and logic for playing the 2048 game.
"""

from .numbersgame import NumbersGame

__all__ = ["NumbersGame"]
