"""Request aggregation, privacy-state derivation and ingestion."""
