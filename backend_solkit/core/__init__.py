"""
Core cross-cutting definitions: the typed error taxonomy shared by the
codec, key manager, instruction builders, validator and API layer.
"""
