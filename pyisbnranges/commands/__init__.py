"""
Sub-commands of the isbnranges cli, one module per command.
"""
