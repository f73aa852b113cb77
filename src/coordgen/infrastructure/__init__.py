"""Infrastructure: engine adapters and boundary marshalling."""
