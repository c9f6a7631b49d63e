"""FormCanvas — form builder canvas layout service."""
