"""
Database package: Neo4j connection handling.
"""

from .neo4j_handler import Neo4jHandler

__all__ = ["Neo4jHandler"]
