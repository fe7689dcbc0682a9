"""adrwatch - terminal monitor for Argentine ADRs and peso exchange rates"""

__version__ = "0.1.0"
