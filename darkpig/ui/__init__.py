"""User interface for Dark Pig Git"""
