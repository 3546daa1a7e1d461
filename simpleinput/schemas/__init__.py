from .input import CollectionEntry, InputSpec, RenderOptions, SubfieldOptions

__all__ = ["InputSpec", "RenderOptions", "SubfieldOptions", "CollectionEntry"]
