"""Physical constants and analytical reference solutions."""
