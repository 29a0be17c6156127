"""
Test suite for the cellquill project.
"""
