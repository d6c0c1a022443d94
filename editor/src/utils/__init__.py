"""Utilities: undo/redo history and error reporting"""
