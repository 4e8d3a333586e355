"""
Core module - Pure domain logic with no external dependencies.

This module contains:
- ports/: Abstract interfaces that adapters must implement
- exceptions: Centralized exception hierarchy
"""

from .ports import *
from .exceptions import *
