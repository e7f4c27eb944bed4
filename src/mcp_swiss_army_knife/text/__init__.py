from .normalize import apply_to_document, collapse_doubled_blank_lines, remove_blank_lines

__all__ = ["apply_to_document", "collapse_doubled_blank_lines", "remove_blank_lines"]
