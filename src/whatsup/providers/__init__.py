"""Status providers supported by whatsup."""
