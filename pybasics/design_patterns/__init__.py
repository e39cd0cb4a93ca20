"""
Textbook design patterns, grouped as creational, structural and behavioral.
"""
