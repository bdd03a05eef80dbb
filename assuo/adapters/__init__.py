"""
Adapters module
Maps external document encodings to the Document model
"""
