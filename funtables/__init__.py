"""Fun × Tables: a multiplication quiz game."""
