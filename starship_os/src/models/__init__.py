"""Plain data records used by the ship computer."""
