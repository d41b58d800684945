"""
Utilities Package

Parsing and validation helpers shared by hosting implementations.
"""
