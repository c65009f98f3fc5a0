from .utils import collect_inputs, load_type_overrides, merge_files

__all__ = [
    "collect_inputs",
    "load_type_overrides",
    "merge_files",
]
