"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Feature types, geometry kinds, severities
- exceptions: Custom exception hierarchy
"""
