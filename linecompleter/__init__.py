"""
linecompleter - Completion engine for interactive line editors
"""

VERSION = "0.1.0"
