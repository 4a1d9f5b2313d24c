"""
Top-level package for the rank browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    rank_browser.core
    rank_browser.services
    rank_browser.ui
"""

__all__: list[str] = []
