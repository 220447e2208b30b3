"""Automaton data structure, its description type and error hierarchy."""
