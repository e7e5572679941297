"""
Core package for the short-term rental listings dashboard.

Submodules provide data loading, filtering, analytics and user interface
rendering helpers that are orchestrated by the top-level `app.py`.
"""
