"""
Infrastructure package for the accumulator.

This package contains infrastructure components including data access, logging,
command line parsing, and other cross-cutting concerns.
"""
