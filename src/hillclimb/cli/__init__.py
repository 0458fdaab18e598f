"""Command line interface for hillclimb."""
