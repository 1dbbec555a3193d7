"""Domain layer: models, upstream transformers and orchestration services."""
