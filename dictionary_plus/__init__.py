"""
Dictionary Plus - Desktop Dictionary Lookup

A small search application that looks words up in a public dictionary
service, offers live word suggestions while typing, and remembers which
dictionaries the user has enabled.
"""

__version__ = "1.0.0"
__author__ = "Dictionary Plus Contributors"
