"""
friendgraph: friend lists and shortest connections in a social network.

Loads an undirected friendship graph from an edge-list file and answers
two questions: who are a person's friends, and what is the shortest
chain of friendships between two people.
"""

__version__ = "0.1.0"
