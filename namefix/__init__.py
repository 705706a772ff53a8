"""Misspelled proper-noun matcher.

Loads reference names and phrases, proposes the closest reference name
word for every capitalized phrase word, and reports the matches.
"""
