"""Configuration dictionaries for the shooter"""
