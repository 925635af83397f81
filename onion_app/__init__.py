"""
Onion Greetings
===============

REST service exposing greeting resources, composed from feature modules.
"""

__version__ = "1.0.0"
