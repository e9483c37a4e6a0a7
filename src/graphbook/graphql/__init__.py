"""
GraphQL API for Graphbook using Strawberry
"""
