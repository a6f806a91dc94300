"""Command-line interface for clusterconf."""
