"""Project configuration.

``config.version`` is importable without third-party packages (``setup.py``
relies on it); ``config.settings`` loads the layered configuration on import.
"""
