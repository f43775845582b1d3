"""Board, ship and attack mechanics."""
