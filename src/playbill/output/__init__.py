"""Output layer. Adapts ServiceResult to human, table, quiet or JSON text."""
