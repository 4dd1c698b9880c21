"""Processor boost mode manager for Windows power plans."""
