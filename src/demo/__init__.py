"""Demo drivers built on the math kernel."""
