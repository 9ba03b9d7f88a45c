"""
CLI Package

Command-line front end for the plate analysis.
"""
