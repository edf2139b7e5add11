"""
Pathtrace: graph model and step-recording shortest-path engines.

Builds random connected graphs, runs Dijkstra's algorithm while recording
a replayable trace of snapshots, and solves monotone grid paths with
dynamic programming. Rendering is left to whoever consumes the results.
"""

__version__ = "0.1.0"
