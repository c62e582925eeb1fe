"""Graph construction and cycle detection."""
