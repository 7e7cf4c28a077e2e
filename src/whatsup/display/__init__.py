"""Output formatting for whatsup."""
