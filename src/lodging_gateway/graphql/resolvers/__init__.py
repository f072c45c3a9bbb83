"""Resolver package for the GraphQL schema.

Root fields delegate here; each resolver issues exactly one upstream call
through the gateway found in the request context.
"""
