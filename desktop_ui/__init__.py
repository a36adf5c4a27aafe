"""
Desktop shell - PySide6/QML front end for the card deck.
"""
