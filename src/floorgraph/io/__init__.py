"""Reading wall snapshots and writing detection results as JSON."""
