"""
Core building blocks: exceptions, settings, models, interfaces and wiring.
"""
