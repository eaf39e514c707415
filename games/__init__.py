"""Games built on the playfield framework."""
