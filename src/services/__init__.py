"""
Utility functions for Lambda handler operations.

This package contains reusable service functions for rendering the
confirmation email and loading runtime settings.
"""

__all__ = ['confirmation', 'settings']
