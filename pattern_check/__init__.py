"""
Pattern Check - Flow Pattern Evaluation Action

An action node for a flow runner. Evaluates declarative field-matching
patterns against an event payload and decides whether the execution
continues, stops without a pattern match, or fails.
"""

__version__ = "1.0.5"
__author__ = "JustNZ"
