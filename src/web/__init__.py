"""Web layer: form synchronizer, list renderer, form mode machine, controller and FastAPI app."""
