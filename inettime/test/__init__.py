"""
# Test harness primitives for the &inettime projects.
"""
