"""HTTP surface for the impostor word game."""
