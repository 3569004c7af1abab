"""
Controllers
===========
Translate user input (pointer events, typed numbers) into canvas state changes.

Note: This package should be pure Python and should NOT import PySide6.
"""
