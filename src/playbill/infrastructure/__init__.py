"""Infrastructure layer: reading invoices and play catalogs from disk."""
