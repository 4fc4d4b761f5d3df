"""
stockcast - Technical Indicator and Statistical Forecast Engine

Computes a fixed battery of technical indicators and a short-horizon
statistical price forecast from an ordered series of daily price bars.
Both engines are pure functions of their input and configuration.
"""

__version__ = "0.1.0"
__author__ = "stockcast Team"
