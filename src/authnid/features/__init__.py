"""Features of authnid."""
