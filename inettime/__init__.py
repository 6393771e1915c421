"""
# Internet Time projects.
"""
