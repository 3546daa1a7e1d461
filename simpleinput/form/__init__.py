from .builder import FormBuilder, humanize, underscore

__all__ = ["FormBuilder", "humanize", "underscore"]
