"""Prompt Studio: rule-based prompt analysis, transformation and quality scoring."""

__version__ = "0.1.0"
