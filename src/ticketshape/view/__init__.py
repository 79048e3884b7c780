"""
The VIEW layer renders ticket layers with Qt (PySide6).
"""
