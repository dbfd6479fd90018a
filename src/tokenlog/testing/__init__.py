"""Testing – doubles for code that logs through tokenlog."""
