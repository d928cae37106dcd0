"""
Service layer for wiki content rendering.

This package contains the sanitizer, Markdown converter, auto-linker and the
renderer that composes them, plus the editor conversion helpers.
"""
