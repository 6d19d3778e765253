"""Core types: crates, trucks, the occupancy grid and plan results."""
