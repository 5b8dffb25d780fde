"""Core modules for cppnew.

- settings: tool settings from file and environment
- config: flag resolution and ProjectConfig
- renderer: placeholder substitution
- materializer: writing the project tree
"""
