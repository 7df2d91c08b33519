"""Zone and proximity geometry for pitch locations."""
