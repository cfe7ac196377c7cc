# src/fxconv/__init__.py
"""
FXConv - Real-Time Console Currency Converter

An interactive terminal application that converts amounts between currencies
using live exchange rates from the Frankfurter API, and keeps a history of
the conversions made during the session.
"""

__version__ = "1.0.0"
__author__ = "Daniel Edgardo Espitia"
