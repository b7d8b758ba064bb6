"""
Pontifex Shared Module
======================

Configuration, logging and console utilities used by the Pontifex
cipher package.
"""

from shared.config import CipherConfig, GlobalConfig, PontifexConfig

__all__ = ["CipherConfig", "GlobalConfig", "PontifexConfig"]
