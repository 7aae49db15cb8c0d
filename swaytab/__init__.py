"""
swaytab

Pick a Sway window with a fuzzy filter tool such as fzf or bemenu and focus it.
"""

__version__ = "0.1.0"
